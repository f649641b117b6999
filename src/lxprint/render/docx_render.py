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

from collections.abc import Sequence
from pathlib import Path
from typing import Final

from docx import Document as create_docx_document
from docx.enum.section import WD_ORIENTATION
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_BREAK
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Mm, Pt

from ..reports.options import Orientation
from ..reports.types import (
    ChannelHookupContent,
    CombinedReport,
    CuttingList,
    EquipmentSummary,
    GroupHeader,
    HangingScheduleContent,
    PatchContent,
    PowerSummary,
    ReportModel,
    TargetListContent,
)
from .page import PAGE_MARGIN_MM, page_size_mm

_TABLE_STYLE: Final = "Table Grid"
_PATCH_HEADINGS: Final = ("Ch", "Addr", "Type")


def render_report_docx(
    combined: CombinedReport,
    output_path: str | Path,
    *,
    paper_size: str,
    orientation: Orientation,
    footer_text: str,
    date_text: str | None = None,
    page_numbers: bool = True,
) -> Path:
    """Render the combined report as an editable Word document."""
    output_path = Path(output_path)
    doc = create_docx_document()

    page_w_mm, page_h_mm = page_size_mm(paper_size, orientation)
    section = doc.sections[0]
    section.orientation = (
        WD_ORIENTATION.LANDSCAPE if orientation == "landscape" else WD_ORIENTATION.PORTRAIT
    )
    section.page_width = Mm(page_w_mm)
    section.page_height = Mm(page_h_mm)
    margin = Mm(PAGE_MARGIN_MM)
    section.top_margin = margin
    section.bottom_margin = margin
    section.left_margin = margin
    section.right_margin = margin
    _write_footer(section.footer.paragraphs[0], footer_text, date_text, page_numbers)

    first = True
    if combined.cover is not None:
        _write_cover(doc, combined)
        first = False
    for report in combined.reports:
        if not first:
            _page_break(doc)
        first = False
        _write_report(doc, combined, report)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(output_path))
    return output_path


def _write_cover(doc, combined: CombinedReport) -> None:
    cover = combined.cover
    show = combined.show
    title = doc.add_heading(cover.title, level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    name = doc.add_heading(show.name, level=1)
    name.alignment = WD_ALIGN_PARAGRAPH.CENTER
    if show.venue:
        venue = doc.add_paragraph(show.venue)
        venue.alignment = WD_ALIGN_PARAGRAPH.CENTER
    for label, value in (*show.staff(), *show.custom_fields):
        paragraph = doc.add_paragraph()
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
        paragraph.add_run(f"{label}: ").bold = True
        paragraph.add_run(value)
    if cover.included_reports:
        doc.add_heading("Included Reports", level=2)
        for label in cover.included_reports:
            doc.add_paragraph(label, style="List Bullet")


def _write_report(doc, combined: CombinedReport, report: ReportModel) -> None:
    _write_header(doc, combined, report.title)
    content = report.content
    if isinstance(content, ChannelHookupContent):
        _add_table(
            doc,
            [column.label for column in content.columns],
            [[row.cell(column.key) for column in content.columns] for row in content.rows],
        )
    elif isinstance(content, HangingScheduleContent):
        for group in content.groups:
            doc.add_heading(
                f"{group.position} ({group.unit_count} units, {group.total_watts:,} W)",
                level=2,
            )
            _add_table(
                doc,
                [column.label for column in content.columns],
                [[row.cell(column.key) for column in content.columns] for row in group.rows],
            )
    elif isinstance(content, PatchContent):
        for index, page in enumerate(content.pages):
            if index:
                _page_break(doc)
                _write_header(doc, combined, report.title)
            _write_patch_page(doc, page, content.column_count)
    elif isinstance(content, EquipmentSummary):
        rows = [[row.type, str(row.count)] for row in content.rows]
        rows.append(["Total", str(content.total)])
        _add_table(doc, ["Type", "Count"], rows)
    elif isinstance(content, CuttingList):
        for group in content.groups:
            doc.add_heading(f"{group.name} ({group.count} cuts)", level=2)
            _add_table(
                doc,
                [content.item_heading, "Frame Size", "Count"],
                [[item.label, item.frame_size, str(item.count)] for item in group.items],
            )
        doc.add_paragraph(f"{content.total_colors} colors, {content.total_cuts} cuts")
    elif isinstance(content, PowerSummary):
        rows = [[row.position, str(row.count), f"{row.watts:,}"] for row in content.rows]
        rows.append(["Total", str(content.total_devices), f"{content.total_watts:,}"])
        _add_table(doc, ["Position", "Devices", "Watts"], rows)
    elif isinstance(content, TargetListContent):
        for target_section in content.sections:
            doc.add_heading(target_section.title, level=2)
            _add_table(
                doc,
                ["ID", "Label"],
                [[target.target_id, target.label or ""] for target in target_section.targets],
            )
    else:
        raise TypeError(f"unsupported report content: {type(content).__name__}")


def _write_header(doc, combined: CombinedReport, title: str) -> None:
    show = combined.show
    heading = doc.add_heading(title, level=1)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
    line = " | ".join(part for part in (show.venue, show.name) if part)
    if line:
        paragraph = doc.add_paragraph(line)
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    staff = "  ".join(f"{label}: {value}" for label, value in show.staff())
    if staff:
        paragraph = doc.add_paragraph(staff)
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER


def _write_patch_page(doc, page, column_count: int) -> None:
    depth = max((len(column) for column in page), default=0)
    headings = list(_PATCH_HEADINGS) * column_count
    rows: list[list[str]] = []
    for index in range(depth):
        cells: list[str] = []
        for column_index in range(column_count):
            column = page[column_index] if column_index < len(page) else ()
            if index >= len(column):
                cells.extend(["", "", ""])
                continue
            row = column[index]
            if isinstance(row, GroupHeader):
                cells.extend([row.title.upper(), "", ""])
            else:
                cells.extend([row.display_channel, row.display_address, row.cell("type")])
        rows.append(cells)
    _add_table(doc, headings, rows, font_size=7)


def _add_table(
    doc,
    headings: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    font_size: float = 8,
):
    table = doc.add_table(rows=1, cols=len(headings))
    table.style = _TABLE_STYLE
    for cell, heading in zip(table.rows[0].cells, headings):
        cell.text = ""
        run = cell.paragraphs[0].add_run(heading)
        run.bold = True
        run.font.size = Pt(font_size)
    for values in rows:
        cells = table.add_row().cells
        for cell, value in zip(cells, values):
            cell.text = ""
            cell.paragraphs[0].add_run(value).font.size = Pt(font_size)
    _mark_header_row(table.rows[0])
    return table


def _mark_header_row(row) -> None:
    tr_pr = row._tr.get_or_add_trPr()
    header = OxmlElement("w:tblHeader")
    header.set(qn("w:val"), "true")
    tr_pr.append(header)


def _page_break(doc) -> None:
    doc.add_paragraph().add_run().add_break(WD_BREAK.PAGE)


def _write_footer(paragraph, text: str, date_text: str | None, page_numbers: bool) -> None:
    pieces = [text]
    if date_text:
        pieces.append(date_text)
    paragraph.text = "    ".join(pieces)
    if page_numbers:
        paragraph.add_run("    Page ")
        _add_field(paragraph, "PAGE")
        paragraph.add_run(" of ")
        _add_field(paragraph, "NUMPAGES")


def _add_field(paragraph, instruction: str) -> None:
    run = paragraph.add_run()
    begin = OxmlElement("w:fldChar")
    begin.set(qn("w:fldCharType"), "begin")
    instr = OxmlElement("w:instrText")
    instr.set(qn("xml:space"), "preserve")
    instr.text = instruction
    end = OxmlElement("w:fldChar")
    end.set(qn("w:fldCharType"), "end")
    run._r.append(begin)
    run._r.append(instr)
    run._r.append(end)
