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

from dataclasses import dataclass
from typing import Literal, TypeVar, Union

from ..core.models import Instrument, ShowInfo, Target, TargetType

RowT = TypeVar("RowT")

Column = tuple[RowT, ...]
Page = tuple[Column[RowT], ...]

ReportKind = Literal["table", "positions", "columns", "summary", "cuts", "power", "targets"]


@dataclass(frozen=True)
class TableColumn:
    key: str
    label: str


@dataclass(frozen=True)
class ChannelRow:
    """One instrument with its resolved display fields."""

    instrument: Instrument
    display_channel: str
    display_address: str
    is_secondary_part: bool = False

    is_header = False

    def cell(self, key: str) -> str:
        if key == "channel":
            return self.display_channel
        if key == "address":
            return self.display_address
        if key == "frame_size":
            return self.instrument.gel_frame_size or ""
        value = getattr(self.instrument, key, None)
        return "" if value is None else str(value)


@dataclass(frozen=True)
class GroupHeader:
    title: str

    is_header = True


PatchRow = Union[ChannelRow, GroupHeader]


@dataclass(frozen=True)
class PositionGroup:
    position: str
    rows: tuple[ChannelRow, ...]
    unit_count: int
    total_watts: int


@dataclass(frozen=True)
class PowerRow:
    position: str
    count: int
    watts: int


@dataclass(frozen=True)
class PowerSummary:
    rows: tuple[PowerRow, ...]
    total_devices: int
    total_watts: int


@dataclass(frozen=True)
class EquipmentRow:
    type: str
    count: int


@dataclass(frozen=True)
class EquipmentSummary:
    rows: tuple[EquipmentRow, ...]
    total: int


@dataclass(frozen=True)
class CutItem:
    """One line of a cut group: a fixture type (by color) or a color (by type)."""

    label: str
    frame_size: str
    count: int


@dataclass(frozen=True)
class CutGroup:
    name: str
    items: tuple[CutItem, ...]
    count: int


@dataclass(frozen=True)
class CuttingList:
    groups: tuple[CutGroup, ...]
    total_colors: int
    total_cuts: int
    group_by: Literal["color", "type"] = "color"

    @property
    def item_heading(self) -> str:
        return "Type" if self.group_by == "color" else "Color"


@dataclass(frozen=True)
class TargetSection:
    target_type: TargetType
    title: str
    targets: tuple[Target, ...]


@dataclass(frozen=True)
class ChannelHookupContent:
    columns: tuple[TableColumn, ...]
    rows: tuple[ChannelRow, ...]


@dataclass(frozen=True)
class HangingScheduleContent:
    columns: tuple[TableColumn, ...]
    groups: tuple[PositionGroup, ...]


@dataclass(frozen=True)
class PatchContent:
    pages: tuple[Page[PatchRow], ...]
    column_count: int
    rows_per_column: int


@dataclass(frozen=True)
class TargetListContent:
    sections: tuple[TargetSection, ...]


ReportContent = Union[
    ChannelHookupContent,
    HangingScheduleContent,
    PatchContent,
    EquipmentSummary,
    CuttingList,
    PowerSummary,
    TargetListContent,
]


@dataclass(frozen=True)
class CoverModel:
    title: str
    included_reports: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReportModel:
    """Render-ready model for one report fragment."""

    report_id: str
    label: str
    title: str
    kind: ReportKind
    orientation: str
    content: ReportContent
    cover: CoverModel | None = None


@dataclass(frozen=True)
class CombinedReport:
    show: ShowInfo
    reports: tuple[ReportModel, ...]
    cover: CoverModel | None = None

    @property
    def included_reports(self) -> tuple[str, ...]:
        return tuple(report.label for report in self.reports)
