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

from typing import Final

from ..reports.options import Orientation

A4_PORTRAIT_WIDTH_MM = 210.0
A4_PORTRAIT_HEIGHT_MM = 297.0
LETTER_PORTRAIT_WIDTH_MM = 215.9
LETTER_PORTRAIT_HEIGHT_MM = 279.4

PAGE_MARGIN_MM: Final = 10.0
FOOTER_MARGIN_MM: Final = 14.0

_PORTRAIT_SIZES_MM: dict[str, tuple[float, float]] = {
    "A4": (A4_PORTRAIT_WIDTH_MM, A4_PORTRAIT_HEIGHT_MM),
    "LETTER": (LETTER_PORTRAIT_WIDTH_MM, LETTER_PORTRAIT_HEIGHT_MM),
}


def page_size_mm(paper_size: str, orientation: Orientation) -> tuple[float, float]:
    key = paper_size.strip().upper()
    if key not in _PORTRAIT_SIZES_MM:
        raise ValueError(f"unknown paper size: {paper_size}")
    width, height = _PORTRAIT_SIZES_MM[key]
    if orientation == "landscape":
        width, height = height, width
    return width, height


__all__ = [
    "A4_PORTRAIT_HEIGHT_MM",
    "A4_PORTRAIT_WIDTH_MM",
    "FOOTER_MARGIN_MM",
    "LETTER_PORTRAIT_HEIGHT_MM",
    "LETTER_PORTRAIT_WIDTH_MM",
    "PAGE_MARGIN_MM",
    "page_size_mm",
]
