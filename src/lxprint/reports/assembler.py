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
from dataclasses import replace
from typing import Final

from ..core.models import ShowSnapshot
from .options import ReportOptions
from .pagination import flatten
from .registry import REPORT_IDS, get_report
from .types import (
    ChannelHookupContent,
    CombinedReport,
    CoverModel,
    CuttingList,
    EquipmentSummary,
    HangingScheduleContent,
    PatchContent,
    PowerSummary,
    ReportModel,
    TargetListContent,
)

COMBINED_COVER_TITLE: Final = "Unified Show Reports"


def assemble(
    report_id: str,
    snapshot: ShowSnapshot,
    options: ReportOptions | None = None,
) -> ReportModel | None:
    """Build the render-ready model for one report.

    Returns ``None`` when the snapshot holds nothing this report can show;
    callers drop the report rather than treating it as a failure.
    """
    resolved = (options or ReportOptions()).validate()
    definition = get_report(report_id)
    content = definition.build(snapshot, resolved)
    if content is None:
        return None
    cover = CoverModel(title=definition.label) if resolved.include_cover else None
    return ReportModel(
        report_id=definition.report_id,
        label=definition.label,
        title=definition.title,
        kind=definition.kind,
        orientation=resolved.orientation,
        content=content,
        cover=cover,
    )


def assemble_combined(
    report_ids: Sequence[str],
    snapshot: ShowSnapshot,
    options: ReportOptions | None = None,
    *,
    cover_title: str = COMBINED_COVER_TITLE,
) -> CombinedReport:
    """Assemble several reports behind one shared cover, in the order requested."""
    resolved = (options or ReportOptions()).validate()
    fragment_options = replace(resolved, include_cover=False)

    seen: set[str] = set()
    reports: list[ReportModel] = []
    for report_id in report_ids:
        definition = get_report(report_id)
        if definition.report_id in seen:
            continue
        seen.add(definition.report_id)
        model = assemble(definition.report_id, snapshot, fragment_options)
        if model is not None:
            reports.append(model)

    cover = None
    if resolved.include_cover and reports:
        cover = CoverModel(
            title=cover_title,
            included_reports=tuple(report.label for report in reports),
        )
    return CombinedReport(show=snapshot.show, reports=tuple(reports), cover=cover)


def available_reports(snapshot: ShowSnapshot, options: ReportOptions | None = None) -> list[str]:
    """Return the report ids that would produce output for this snapshot."""
    return [
        report_id for report_id in REPORT_IDS if assemble(report_id, snapshot, options) is not None
    ]


def row_count(model: ReportModel) -> int:
    """Count the instrument (or target) rows a report prints, ignoring headers."""
    content = model.content
    if isinstance(content, ChannelHookupContent):
        return len(content.rows)
    if isinstance(content, HangingScheduleContent):
        return sum(group.unit_count for group in content.groups)
    if isinstance(content, PatchContent):
        return sum(1 for row in flatten(content.pages) if not row.is_header)
    if isinstance(content, EquipmentSummary):
        return content.total
    if isinstance(content, CuttingList):
        return content.total_cuts
    if isinstance(content, PowerSummary):
        return content.total_devices
    if isinstance(content, TargetListContent):
        return sum(len(section.targets) for section in content.sections)
    raise TypeError(f"unsupported report content: {type(content).__name__}")
