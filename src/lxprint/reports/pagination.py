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
from typing import Final

from .types import Page, RowT

# Estimated fixed-height rows per page column, not a measured layout.
ROWS_PER_COLUMN_PORTRAIT: Final = 42
ROWS_PER_COLUMN_LANDSCAPE: Final = 28


def rows_per_column(orientation: str) -> int:
    if orientation == "landscape":
        return ROWS_PER_COLUMN_LANDSCAPE
    return ROWS_PER_COLUMN_PORTRAIT


def paginate(
    rows: Sequence[RowT],
    column_count: int,
    rows_per_column: int,
) -> tuple[Page[RowT], ...]:
    """Split rows into pages, then split each page into columns.

    Rows fill the first column of a page top to bottom before moving to the
    next column, so reading order is kept across columns and pages. Group
    headers are ordinary rows here and may land at the bottom of a column.
    """
    if isinstance(column_count, bool) or column_count <= 0:
        raise ValueError("column_count must be a positive integer")
    if isinstance(rows_per_column, bool) or rows_per_column <= 0:
        raise ValueError("rows_per_column must be a positive integer")

    rows_per_page = rows_per_column * column_count
    pages: list[Page[RowT]] = []
    for page_start in range(0, len(rows), rows_per_page):
        page_rows = rows[page_start : page_start + rows_per_page]
        columns = []
        for column_idx in range(column_count):
            start = column_idx * rows_per_column
            column = tuple(page_rows[start : start + rows_per_column])
            if column:
                columns.append(column)
        pages.append(tuple(columns))
    return tuple(pages)


def flatten(pages: Sequence[Page[RowT]]) -> list[RowT]:
    return [row for page in pages for column in page for row in column]
