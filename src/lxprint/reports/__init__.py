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

"""Report data shaping: grouping, channel parts, addresses and pagination."""

from .addressing import format_address
from .assembler import assemble, assemble_combined, available_reports, row_count
from .channels import (
    ChannelOrder,
    resolve_channel_parts,
    sort_by_channel,
    sort_by_type_then_channel,
)
from .options import ReportOptions
from .pagination import flatten, paginate, rows_per_column
from .registry import REPORT_IDS, REPORTS, ReportDefinition, get_report
from .types import CombinedReport, CoverModel, ReportModel

__all__ = [
    "REPORTS",
    "REPORT_IDS",
    "ChannelOrder",
    "CombinedReport",
    "CoverModel",
    "ReportDefinition",
    "ReportModel",
    "ReportOptions",
    "assemble",
    "assemble_combined",
    "available_reports",
    "flatten",
    "format_address",
    "get_report",
    "paginate",
    "resolve_channel_parts",
    "row_count",
    "rows_per_column",
    "sort_by_channel",
    "sort_by_type_then_channel",
]
