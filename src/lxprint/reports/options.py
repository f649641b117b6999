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
from typing import Final, Literal

from .addressing import ADDRESS_MODES, AddressMode
from .channels import CHANNEL_DISPLAY_MODES, ChannelDisplayMode
from .columns import CHANNEL_HOOKUP_CATALOG, HANGING_SCHEDULE_CATALOG, select_columns

Orientation = Literal["portrait", "landscape"]
CuttingListGrouping = Literal["color", "type"]
TargetFilter = Literal["all", "group", "preset", "sub"]

ORIENTATIONS: Final[tuple[str, ...]] = ("portrait", "landscape")
CUTTING_LIST_GROUPINGS: Final[tuple[str, ...]] = ("color", "type")
TARGET_FILTERS: Final[tuple[str, ...]] = ("all", "group", "preset", "sub")
DEFAULT_PATCH_COLUMNS: Final = 3


@dataclass(frozen=True)
class ReportOptions:
    """Display and layout options threaded into every report builder."""

    orientation: Orientation = "landscape"
    address_mode: AddressMode = "universe"
    show_universe1: bool = False
    universe_separator: str = "/"
    channel_display_mode: ChannelDisplayMode = "parts"
    column_count: int = DEFAULT_PATCH_COLUMNS
    include_cover: bool = True
    group_patch_by_type: bool = False
    cutting_list_by: CuttingListGrouping = "color"
    target_filter: TargetFilter = "all"
    # None keeps the default columns of each report.
    hookup_columns: tuple[str, ...] | None = None
    schedule_columns: tuple[str, ...] | None = None

    def validate(self) -> ReportOptions:
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"orientation must be one of: {', '.join(ORIENTATIONS)}")
        if self.address_mode not in ADDRESS_MODES:
            raise ValueError(f"address_mode must be one of: {', '.join(ADDRESS_MODES)}")
        if self.channel_display_mode not in CHANNEL_DISPLAY_MODES:
            raise ValueError(
                f"channel_display_mode must be one of: {', '.join(CHANNEL_DISPLAY_MODES)}"
            )
        if not isinstance(self.universe_separator, str):
            raise ValueError("universe_separator must be a string")
        if isinstance(self.column_count, bool) or not isinstance(self.column_count, int):
            raise ValueError("column_count must be a positive integer")
        if self.column_count <= 0:
            raise ValueError("column_count must be a positive integer")
        if self.cutting_list_by not in CUTTING_LIST_GROUPINGS:
            raise ValueError(
                f"cutting_list_by must be one of: {', '.join(CUTTING_LIST_GROUPINGS)}"
            )
        if self.target_filter not in TARGET_FILTERS:
            raise ValueError(f"target_filter must be one of: {', '.join(TARGET_FILTERS)}")
        if self.hookup_columns is not None:
            select_columns(CHANNEL_HOOKUP_CATALOG, self.hookup_columns, field="hookup_columns")
        if self.schedule_columns is not None:
            select_columns(
                HANGING_SCHEDULE_CATALOG, self.schedule_columns, field="schedule_columns"
            )
        return self
