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

"""Channel ordering and multi-part channel labels."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final, Literal, Union

from ..core.coercion import alpha_key, leading_float
from ..core.models import Instrument
from .types import ChannelRow, GroupHeader

ChannelDisplayMode = Literal["parts", "dots", "hide", "raw"]

CHANNEL_DISPLAY_MODES: Final[tuple[str, ...]] = ("parts", "dots", "hide", "raw")
MISSING_CHANNEL_LABEL: Final = "-"
UNKNOWN_TYPE: Final = "Unknown"

OrderedItem = Union[Instrument, GroupHeader]


@dataclass(frozen=True)
class ChannelOrder:
    """Instruments already sorted by channel, optionally split by group headers.

    Only the ``sort_*`` functions below build one; the part resolver refuses
    anything else so it never sees unsorted input.
    """

    items: tuple[OrderedItem, ...]

    def __len__(self) -> int:
        return len(self.items)


def channel_number(instrument: Instrument) -> float:
    return leading_float(instrument.channel, default=0.0)


def _channel_sort_key(instrument: Instrument) -> tuple[float, int]:
    return channel_number(instrument), instrument.effective_part


def sort_by_channel(instruments: Iterable[Instrument]) -> ChannelOrder:
    # sorted() is stable, so input order breaks ties within (channel, part).
    return ChannelOrder(items=tuple(sorted(instruments, key=_channel_sort_key)))


def sort_by_type_then_channel(instruments: Iterable[Instrument]) -> ChannelOrder:
    groups: dict[str, list[Instrument]] = {}
    for instrument in instruments:
        groups.setdefault(instrument.type or UNKNOWN_TYPE, []).append(instrument)

    items: list[OrderedItem] = []
    for type_name in sorted(groups, key=alpha_key):
        items.append(GroupHeader(title=type_name))
        items.extend(sorted(groups[type_name], key=_channel_sort_key))
    return ChannelOrder(items=tuple(items))


def part_label(instrument: Instrument, mode: str) -> str:
    """Label a secondary part according to the channel display mode."""
    if mode == "parts":
        return f"P{instrument.effective_part}"
    if mode == "dots":
        return f".{instrument.effective_part}"
    if mode == "hide":
        return ""
    return instrument.channel or ""


def resolve_channel_parts(
    order: ChannelOrder,
    mode: str,
    *,
    address: Callable[[Instrument], str] | None = None,
) -> tuple[ChannelRow | GroupHeader, ...]:
    """Resolve display channels for a channel-sorted sequence.

    A row is a secondary part when it repeats the channel of the row before it
    and carries a part number. The first row seen for a channel stays primary
    whatever its part number is.
    """
    if not isinstance(order, ChannelOrder):
        raise TypeError("resolve_channel_parts requires a ChannelOrder from sort_by_channel")

    rows: list[ChannelRow | GroupHeader] = []
    last_channel: str | None = None
    for item in order.items:
        if isinstance(item, GroupHeader):
            last_channel = None
            rows.append(item)
            continue
        secondary = (
            item.channel is not None and item.channel == last_channel and item.part is not None
        )
        if secondary:
            display = part_label(item, mode)
        else:
            display = item.channel or MISSING_CHANNEL_LABEL
            last_channel = item.channel
        rows.append(
            ChannelRow(
                instrument=item,
                display_channel=display,
                display_address=address(item) if address is not None else "",
                is_secondary_part=secondary,
            )
        )
    return tuple(rows)


def hanging_channel_label(instrument: Instrument, mode: str) -> str:
    """Channel cell for rows listed outside channel order (hanging schedule)."""
    if instrument.part is not None and instrument.part > 1:
        return part_label(instrument, mode)
    return instrument.channel or ""
