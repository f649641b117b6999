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

"""Column catalogs for the tabular instrument reports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from .types import TableColumn

CHANNEL_HOOKUP_CATALOG: Final[tuple[TableColumn, ...]] = (
    TableColumn("channel", "Ch"),
    TableColumn("address", "Addr"),
    TableColumn("position", "Position"),
    TableColumn("unit", "Unit"),
    TableColumn("type", "Type"),
    TableColumn("watt", "Watt"),
    TableColumn("purpose", "Purpose"),
    TableColumn("color", "Color"),
    TableColumn("frame_size", "Frame Size"),
    TableColumn("notes", "Notes"),
)
DEFAULT_CHANNEL_HOOKUP_COLUMNS: Final[tuple[str, ...]] = (
    "channel",
    "address",
    "position",
    "unit",
    "type",
    "watt",
    "purpose",
    "color",
    "notes",
)

# Position is the group heading, so it is never a column here.
HANGING_SCHEDULE_CATALOG: Final[tuple[TableColumn, ...]] = (
    TableColumn("unit", "Unit"),
    TableColumn("type", "Type"),
    TableColumn("channel", "Channel"),
    TableColumn("address", "Address"),
    TableColumn("purpose", "Purpose"),
    TableColumn("color", "Color"),
    TableColumn("watt", "Watt"),
    TableColumn("frame_size", "Frame Size"),
    TableColumn("notes", "Notes"),
)
DEFAULT_HANGING_SCHEDULE_COLUMNS: Final[tuple[str, ...]] = (
    "unit",
    "type",
    "channel",
    "address",
    "purpose",
    "color",
)


def column_keys(catalog: Sequence[TableColumn]) -> tuple[str, ...]:
    return tuple(column.key for column in catalog)


def select_columns(
    catalog: Sequence[TableColumn],
    keys: Sequence[str],
    *,
    field: str,
) -> tuple[TableColumn, ...]:
    """Return the catalog columns named by ``keys``, in the order given."""
    by_key = {column.key: column for column in catalog}
    if not keys:
        raise ValueError(f"{field} must name at least one column")
    selected: list[TableColumn] = []
    for key in keys:
        column = by_key.get(key)
        if column is None:
            raise ValueError(
                f"{field}: unknown column {key} (expected one of: {', '.join(by_key)})"
            )
        if column in selected:
            raise ValueError(f"{field}: column {key} listed twice")
        selected.append(column)
    return tuple(selected)
