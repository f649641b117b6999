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

"""Report definitions: one record per report type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from ..core.models import Instrument, ShowSnapshot, TargetType
from .addressing import format_address
from .channels import resolve_channel_parts, sort_by_channel, sort_by_type_then_channel
from .columns import (
    CHANNEL_HOOKUP_CATALOG,
    DEFAULT_CHANNEL_HOOKUP_COLUMNS,
    DEFAULT_HANGING_SCHEDULE_COLUMNS,
    HANGING_SCHEDULE_CATALOG,
    select_columns,
)
from .grouping import (
    build_cutting_list,
    build_cutting_list_by_type,
    group_hanging_schedule,
    partition_targets,
    summarize_equipment,
    summarize_power,
)
from .options import ReportOptions
from .pagination import paginate, rows_per_column
from .types import (
    ChannelHookupContent,
    ChannelRow,
    HangingScheduleContent,
    PatchContent,
    ReportContent,
    ReportKind,
    TableColumn,
    TargetListContent,
)

ContentBuilder = Callable[[ShowSnapshot, ReportOptions], "ReportContent | None"]

TARGET_FILTER_TYPES: Final[dict[str, TargetType | None]] = {
    "all": None,
    "group": TargetType.GROUP,
    "preset": TargetType.PRESET,
    "sub": TargetType.SUB,
}


@dataclass(frozen=True)
class ReportDefinition:
    report_id: str
    label: str
    title: str
    kind: ReportKind
    build: ContentBuilder
    paginated: bool = False


def hookup_columns(options: ReportOptions) -> tuple[TableColumn, ...]:
    keys = options.hookup_columns or DEFAULT_CHANNEL_HOOKUP_COLUMNS
    return select_columns(CHANNEL_HOOKUP_CATALOG, keys, field="hookup_columns")


def schedule_columns(options: ReportOptions) -> tuple[TableColumn, ...]:
    keys = options.schedule_columns or DEFAULT_HANGING_SCHEDULE_COLUMNS
    return select_columns(HANGING_SCHEDULE_CATALOG, keys, field="schedule_columns")


def address_formatter(options: ReportOptions) -> Callable[[Instrument], str]:
    def _format(instrument: Instrument) -> str:
        return format_address(
            instrument.address,
            instrument.universe,
            options.address_mode,
            options.show_universe1,
            options.universe_separator,
        )

    return _format


def _build_channel_hookup(
    snapshot: ShowSnapshot, options: ReportOptions
) -> ChannelHookupContent | None:
    if not snapshot.instruments:
        return None
    rows = resolve_channel_parts(
        sort_by_channel(snapshot.instruments),
        options.channel_display_mode,
        address=address_formatter(options),
    )
    return ChannelHookupContent(
        columns=hookup_columns(options),
        rows=tuple(row for row in rows if isinstance(row, ChannelRow)),
    )


def _build_hanging_schedule(
    snapshot: ShowSnapshot, options: ReportOptions
) -> HangingScheduleContent | None:
    if not snapshot.instruments:
        return None
    return HangingScheduleContent(
        columns=schedule_columns(options),
        groups=group_hanging_schedule(
            snapshot.instruments,
            channel_display_mode=options.channel_display_mode,
            address=address_formatter(options),
        ),
    )


def _build_patch(snapshot: ShowSnapshot, options: ReportOptions) -> PatchContent | None:
    if not snapshot.instruments:
        return None
    if options.group_patch_by_type:
        order = sort_by_type_then_channel(snapshot.instruments)
    else:
        order = sort_by_channel(snapshot.instruments)
    rows = resolve_channel_parts(
        order,
        options.channel_display_mode,
        address=address_formatter(options),
    )
    capacity = rows_per_column(options.orientation)
    return PatchContent(
        pages=paginate(rows, options.column_count, capacity),
        column_count=options.column_count,
        rows_per_column=capacity,
    )


def _build_equipment_list(snapshot: ShowSnapshot, options: ReportOptions):
    if not snapshot.instruments:
        return None
    return summarize_equipment(snapshot.instruments)


def _build_cutting_list(snapshot: ShowSnapshot, options: ReportOptions):
    if options.cutting_list_by == "type":
        cutting_list = build_cutting_list_by_type(snapshot.instruments)
    else:
        cutting_list = build_cutting_list(snapshot.instruments)
    if not cutting_list.groups:
        return None
    return cutting_list


def _build_power(snapshot: ShowSnapshot, options: ReportOptions):
    if not snapshot.instruments:
        return None
    return summarize_power(snapshot.instruments)


def _build_targets(snapshot: ShowSnapshot, options: ReportOptions) -> TargetListContent | None:
    sections = partition_targets(snapshot.targets, TARGET_FILTER_TYPES[options.target_filter])
    if not sections:
        return None
    return TargetListContent(sections=sections)


REPORT_DEFINITIONS: Final[tuple[ReportDefinition, ...]] = (
    ReportDefinition(
        report_id="channel-hookup",
        label="Channel Hookup",
        title="CHANNEL HOOKUP",
        kind="table",
        build=_build_channel_hookup,
    ),
    ReportDefinition(
        report_id="hanging-schedule",
        label="Hanging Schedule",
        title="HANGING SCHEDULE",
        kind="positions",
        build=_build_hanging_schedule,
    ),
    ReportDefinition(
        report_id="patch",
        label="Patch",
        title="PATCH",
        kind="columns",
        build=_build_patch,
        paginated=True,
    ),
    ReportDefinition(
        report_id="equipment-list",
        label="Equipment List",
        title="EQUIPMENT LIST",
        kind="summary",
        build=_build_equipment_list,
    ),
    ReportDefinition(
        report_id="cutting-list",
        label="Cutting List",
        title="CUTTING LIST",
        kind="cuts",
        build=_build_cutting_list,
    ),
    ReportDefinition(
        report_id="power",
        label="Power Report",
        title="POWER REPORT",
        kind="power",
        build=_build_power,
    ),
    ReportDefinition(
        report_id="eos-targets",
        label="EOS Targets",
        title="EOS TARGETS",
        kind="targets",
        build=_build_targets,
    ),
)

REPORTS: Final[dict[str, ReportDefinition]] = {
    definition.report_id: definition for definition in REPORT_DEFINITIONS
}
REPORT_IDS: Final[tuple[str, ...]] = tuple(REPORTS)


def get_report(report_id: str) -> ReportDefinition:
    definition = REPORTS.get(report_id.strip().lower())
    if definition is None:
        raise ValueError(
            f"unknown report: {report_id} (expected one of: {', '.join(REPORT_IDS)})"
        )
    return definition
