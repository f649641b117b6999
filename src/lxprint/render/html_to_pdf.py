#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import atexit
import html
from pathlib import Path

from playwright.sync_api import Browser, Playwright, sync_playwright

from .page import FOOTER_MARGIN_MM, PAGE_MARGIN_MM

_PLAYWRIGHT: Playwright | None = None
_BROWSER: Browser | None = None

_FOOTER_STYLE = (
    "font-family: Helvetica, Arial, sans-serif; font-size: 7px; color: #6b7280;"
    " width: 100%; margin: 0 10mm; display: flex; justify-content: space-between;"
)


def _shutdown_playwright() -> None:
    global _BROWSER, _PLAYWRIGHT
    browser = _BROWSER
    playwright = _PLAYWRIGHT
    _BROWSER = None
    _PLAYWRIGHT = None
    if browser is not None:
        browser.close()
    if playwright is not None:
        playwright.stop()


def _get_browser() -> Browser:
    global _BROWSER, _PLAYWRIGHT
    if _BROWSER is not None:
        return _BROWSER
    _PLAYWRIGHT = sync_playwright().start()
    _BROWSER = _PLAYWRIGHT.chromium.launch()
    atexit.register(_shutdown_playwright)
    return _BROWSER


def footer_template(
    text: str,
    *,
    date_text: str | None = None,
    page_numbers: bool = True,
) -> str:
    """Build the Chromium footer template printed on every page.

    ``pageNumber`` and ``totalPages`` are filled in by the browser, so numbering
    runs continuously across every report in the document.
    """
    parts = [f"<span>{html.escape(text)}</span>"]
    parts.append(f"<span>{html.escape(date_text)}</span>" if date_text else "<span></span>")
    if page_numbers:
        parts.append(
            '<span>Page <span class="pageNumber"></span> of <span class="totalPages"></span></span>'
        )
    else:
        parts.append("<span></span>")
    return f'<div style="{_FOOTER_STYLE}">{"".join(parts)}</div>'


def render_html_to_pdf(
    html_text: str,
    output_path: str | Path,
    *,
    footer_html: str | None = None,
) -> None:
    output_path = Path(output_path)
    browser = _get_browser()
    page = browser.new_page()
    try:
        page.set_content(html_text, wait_until="networkidle")
        page.emulate_media(media="print")
        margin = f"{PAGE_MARGIN_MM}mm"
        page.pdf(
            path=str(output_path),
            print_background=True,
            prefer_css_page_size=True,
            display_header_footer=footer_html is not None,
            header_template="<span></span>",
            footer_template=footer_html or "<span></span>",
            margin={
                "top": margin,
                "right": margin,
                "bottom": f"{FOOTER_MARGIN_MM}mm" if footer_html else margin,
                "left": margin,
            },
        )
    finally:
        page.close()
