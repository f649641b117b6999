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

"""Grouping and aggregation strategies, one per report shape."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Final

from ..core.coercion import alpha_key, leading_float, leading_int, natural_key
from ..core.models import Instrument, Target, TargetType
from .channels import UNKNOWN_TYPE, hanging_channel_label
from .types import (
    ChannelRow,
    CutGroup,
    CutItem,
    CuttingList,
    EquipmentRow,
    EquipmentSummary,
    PositionGroup,
    PowerRow,
    PowerSummary,
    TargetSection,
)

UNASSIGNED_POSITION: Final = "Unassigned"

TARGET_SECTION_TITLES: Final[dict[TargetType, str]] = {
    TargetType.GROUP: "Groups",
    TargetType.PRESET: "Presets",
    TargetType.SUB: "Subs",
}


def watts_of(instrument: Instrument) -> int:
    return leading_int(instrument.watt, default=0)


def position_of(instrument: Instrument) -> str:
    return instrument.position or UNASSIGNED_POSITION


def _position_sort_key(position: str) -> tuple[int, tuple[tuple[int, int | str], ...], str]:
    if position == UNASSIGNED_POSITION:
        return (1, (), position)
    return (0, natural_key(position), position)


def partition_by_position(instruments: Iterable[Instrument]) -> list[tuple[str, list[Instrument]]]:
    partitions: dict[str, list[Instrument]] = {}
    for instrument in instruments:
        partitions.setdefault(position_of(instrument), []).append(instrument)
    return [
        (position, partitions[position])
        for position in sorted(partitions, key=_position_sort_key)
    ]


def group_hanging_schedule(
    instruments: Iterable[Instrument],
    *,
    channel_display_mode: str,
    address: Callable[[Instrument], str],
) -> tuple[PositionGroup, ...]:
    groups: list[PositionGroup] = []
    for position, members in partition_by_position(instruments):
        rows = tuple(
            ChannelRow(
                instrument=instrument,
                display_channel=hanging_channel_label(instrument, channel_display_mode),
                display_address=address(instrument),
                is_secondary_part=bool(instrument.part and instrument.part > 1),
            )
            for instrument in members
        )
        groups.append(
            PositionGroup(
                position=position,
                rows=rows,
                unit_count=len(rows),
                total_watts=sum(watts_of(instrument) for instrument in members),
            )
        )
    return tuple(groups)


def summarize_power(instruments: Iterable[Instrument]) -> PowerSummary:
    rows = tuple(
        PowerRow(
            position=position,
            count=len(members),
            watts=sum(watts_of(instrument) for instrument in members),
        )
        for position, members in partition_by_position(instruments)
    )
    return PowerSummary(
        rows=rows,
        total_devices=sum(row.count for row in rows),
        total_watts=sum(row.watts for row in rows),
    )


def summarize_equipment(instruments: Iterable[Instrument]) -> EquipmentSummary:
    counts: dict[str, int] = {}
    for instrument in instruments:
        type_name = instrument.type or UNKNOWN_TYPE
        counts[type_name] = counts.get(type_name, 0) + 1
    rows = tuple(
        EquipmentRow(type=type_name, count=counts[type_name])
        for type_name in sorted(counts, key=alpha_key)
    )
    return EquipmentSummary(rows=rows, total=sum(row.count for row in rows))


def _cut_counts(
    instruments: Iterable[Instrument],
    group_key: Callable[[Instrument, str], str],
    item_key: Callable[[Instrument, str], str],
) -> dict[str, dict[tuple[str, str], int]]:
    counts: dict[str, dict[tuple[str, str], int]] = {}
    for instrument in instruments:
        color = (instrument.color or "").strip()
        if not color:
            continue
        cuts = counts.setdefault(group_key(instrument, color), {})
        key = (item_key(instrument, color), instrument.gel_frame_size or "")
        cuts[key] = cuts.get(key, 0) + 1
    return counts


def _cut_groups(
    counts: dict[str, dict[tuple[str, str], int]],
    *,
    group_order: Callable[[str], object],
    item_order: Callable[[str], object],
) -> tuple[CutGroup, ...]:
    groups: list[CutGroup] = []
    for name in sorted(counts, key=group_order):
        cuts = counts[name]
        items = tuple(
            CutItem(label=label, frame_size=frame_size, count=cuts[(label, frame_size)])
            for label, frame_size in sorted(
                cuts,
                key=lambda pair: (item_order(pair[0]), natural_key(pair[1]), pair[1]),
            )
        )
        groups.append(CutGroup(name=name, items=items, count=sum(item.count for item in items)))
    return tuple(groups)


def _color_order(color: str) -> tuple[object, ...]:
    return (natural_key(color), color)


def _type_of(instrument: Instrument, color: str) -> str:
    return instrument.type or UNKNOWN_TYPE


def _color_of(instrument: Instrument, color: str) -> str:
    return color


def build_cutting_list(instruments: Iterable[Instrument]) -> CuttingList:
    """Gel cuts grouped by color, counted per fixture type and frame size."""
    groups = _cut_groups(
        _cut_counts(instruments, _color_of, _type_of),
        group_order=_color_order,
        item_order=alpha_key,
    )
    return CuttingList(
        groups=groups,
        total_colors=len(groups),
        total_cuts=sum(group.count for group in groups),
        group_by="color",
    )


def build_cutting_list_by_type(instruments: Iterable[Instrument]) -> CuttingList:
    """Gel cuts grouped by fixture type, counted per color and frame size."""
    groups = _cut_groups(
        _cut_counts(instruments, _type_of, _color_of),
        group_order=alpha_key,
        item_order=_color_order,
    )
    colors = {item.label for group in groups for item in group.items}
    return CuttingList(
        groups=groups,
        total_colors=len(colors),
        total_cuts=sum(group.count for group in groups),
        group_by="type",
    )


def partition_targets(
    targets: Iterable[Target],
    only: TargetType | None = None,
) -> tuple[TargetSection, ...]:
    buckets: dict[TargetType, list[Target]] = {target_type: [] for target_type in TargetType}
    for target in targets:
        if target.target_type is not None:
            buckets[target.target_type].append(target)

    sections: list[TargetSection] = []
    for target_type in TargetType:
        if only is not None and target_type is not only:
            continue
        members = buckets[target_type]
        if not members:
            continue
        members.sort(key=lambda target: leading_float(target.target_id, default=0.0))
        sections.append(
            TargetSection(
                target_type=target_type,
                title=TARGET_SECTION_TITLES[target_type],
                targets=tuple(members),
            )
        )
    return tuple(sections)
