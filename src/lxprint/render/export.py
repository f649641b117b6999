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

"""Export boundary: assemble, hand off to a renderer, move the artifact into place."""

from __future__ import annotations

import datetime as dt
import os
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..config.installer import DEFAULT_PAPER_SIZE, DEFAULT_TEMPLATE_PATH
from ..config.loader import AppConfig, FooterDefaults
from ..core.models import ShowInfo, ShowSnapshot
from ..reports.assembler import assemble_combined
from ..reports.options import ReportOptions
from ..reports.types import CombinedReport
from .docx_render import render_report_docx
from .html_to_pdf import footer_template, render_html_to_pdf
from .page import page_size_mm
from .templating import render_template

ExportFormat = Literal["pdf", "docx"]
EXPORT_FORMATS: tuple[ExportFormat, ...] = ("pdf", "docx")
PATCH_HEADINGS = ("Ch", "Addr", "Type")

_WHITESPACE_RE = re.compile(r"\s+")
BLANK_NAME_FILE_STEM = "Show"


class ReportExportError(RuntimeError):
    """Raised when a renderer fails to produce the export artifact."""


@dataclass(frozen=True)
class ExportResult:
    path: Path
    format: ExportFormat
    report: CombinedReport


def export_filename(show_name: str | None, ext: str) -> str:
    name = _WHITESPACE_RE.sub("_", (show_name or "").strip()) or BLANK_NAME_FILE_STEM
    return f"{name}_FullReport.{ext.lstrip('.')}"


def footer_text_for(show: ShowInfo, footer: FooterDefaults) -> str:
    return show.report_footer or footer.text


def format_report_date(value: dt.date) -> str:
    return f"{value:%B} {value.day}, {value.year}"


def build_document_context(
    combined: CombinedReport,
    *,
    paper_size: str,
    orientation: str,
    footer: FooterDefaults,
    generated_on: dt.date,
) -> dict[str, object]:
    width_mm, height_mm = page_size_mm(paper_size, orientation)  # type: ignore[arg-type]
    generated_date = format_report_date(generated_on)
    return {
        "show": combined.show,
        "cover": combined.cover,
        "reports": combined.reports,
        "page": {
            "size": paper_size,
            "orientation": orientation,
            "width_mm": width_mm,
            "height_mm": height_mm,
        },
        "footer": {
            "text": footer_text_for(combined.show, footer),
            "date": generated_date if footer.show_date else None,
            "page_numbers": footer.show_page_numbers,
        },
        "generated_date": generated_date,
        "patch_headings": PATCH_HEADINGS,
    }


def resolve_output_path(
    output: str | Path | None,
    show_name: str | None,
    export_format: ExportFormat,
) -> Path:
    filename = export_filename(show_name, export_format)
    if output is None:
        return Path.cwd() / filename
    path = Path(output).expanduser()
    if path.is_dir():
        return path / filename
    return path


def export_reports(
    report_ids: Sequence[str],
    snapshot: ShowSnapshot,
    options: ReportOptions | None = None,
    output: str | Path | None = None,
    *,
    export_format: ExportFormat = "pdf",
    config: AppConfig | None = None,
    generated_on: dt.date | None = None,
) -> ExportResult:
    if export_format not in EXPORT_FORMATS:
        raise ValueError(f"format must be one of: {', '.join(EXPORT_FORMATS)}")
    config = config or AppConfig(template_path=DEFAULT_TEMPLATE_PATH, paper_size=DEFAULT_PAPER_SIZE)
    resolved = (options or config.report.to_options()).validate()

    combined = assemble_combined(report_ids, snapshot, resolved)
    if not combined.reports:
        raise ValueError("nothing to export: every selected report is empty")

    show_name = None if snapshot.show.untitled else snapshot.show.name
    output_path = resolve_output_path(output, show_name, export_format)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = output_path.with_name(f".{output_path.name}.tmp")
    generated_on = generated_on or dt.date.today()

    try:
        if export_format == "pdf":
            _render_pdf(combined, temp_path, resolved, config, generated_on)
        else:
            _render_docx(combined, temp_path, resolved, config, generated_on)
        os.replace(temp_path, output_path)
    except Exception as exc:
        raise ReportExportError(f"failed to export {export_format.upper()}: {exc}") from exc
    finally:
        if temp_path.exists():
            temp_path.unlink()

    return ExportResult(path=output_path, format=export_format, report=combined)


def _render_pdf(
    combined: CombinedReport,
    path: Path,
    options: ReportOptions,
    config: AppConfig,
    generated_on: dt.date,
) -> None:
    context = build_document_context(
        combined,
        paper_size=config.paper_size,
        orientation=options.orientation,
        footer=config.footer,
        generated_on=generated_on,
    )
    html_text = render_template(config.template_path, context)
    footer = context["footer"]
    render_html_to_pdf(
        html_text,
        path,
        footer_html=footer_template(
            footer["text"],  # type: ignore[index]
            date_text=footer["date"],  # type: ignore[index]
            page_numbers=config.footer.show_page_numbers,
        ),
    )


def _render_docx(
    combined: CombinedReport,
    path: Path,
    options: ReportOptions,
    config: AppConfig,
    generated_on: dt.date,
) -> None:
    render_report_docx(
        combined,
        path,
        paper_size=config.paper_size,
        orientation=options.orientation,
        footer_text=footer_text_for(combined.show, config.footer),
        date_text=format_report_date(generated_on) if config.footer.show_date else None,
        page_numbers=config.footer.show_page_numbers,
    )
