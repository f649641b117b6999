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

from pathlib import Path
from typing import Literal

import typer

from ...render.export import export_reports
from ...reports.assembler import row_count
from ..api import build_kv_table, console, status
from ..core.common import (
    _column_list,
    _ctx_value,
    _load_config,
    _load_show,
    _report_options,
    _report_selection,
    _run_cli,
    _warn,
)
from ..startup import ensure_playwright_browsers

ExportFormat = Literal["pdf", "docx"]
OrientationChoice = Literal["portrait", "landscape"]
AddressModeChoice = Literal["universe", "absolute"]
ChannelDisplayChoice = Literal["parts", "dots", "hide", "raw"]
CuttingListChoice = Literal["color", "type"]
TargetChoice = Literal["all", "group", "preset", "sub"]

_EXPORT_HELP = (
    "Export one combined document for a show file.\n\n"
    "Examples:\n"
    "  lxprint export show.json\n"
    "  lxprint export show.json -r channel-hookup -r patch --format docx\n"
    "  lxprint export show.json --all --orientation portrait -o reports/\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_EXPORT_HELP)(export)


def export(
    ctx: typer.Context,
    show_file: Path = typer.Argument(..., help="Show file (JSON) to read."),
    report: list[str] | None = typer.Option(
        None,
        "--report",
        "-r",
        help="Report id to include (repeatable, or comma separated).",
        rich_help_panel="Reports",
    ),
    include_all: bool = typer.Option(
        False,
        "--all",
        help="Include every report type.",
        rich_help_panel="Reports",
    ),
    format: ExportFormat = typer.Option(
        "pdf",
        "--format",
        "-f",
        help="Output format.",
        rich_help_panel="Outputs",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file or directory (defaults to <Show_Name>_FullReport.<format>).",
        rich_help_panel="Outputs",
    ),
    orientation: OrientationChoice | None = typer.Option(
        None,
        "--orientation",
        help="Page orientation.",
        rich_help_panel="Layout",
    ),
    address_mode: AddressModeChoice | None = typer.Option(
        None,
        "--address-mode",
        help="Print addresses as universe/slot or as absolute DMX addresses.",
        rich_help_panel="Layout",
    ),
    show_universe1: bool | None = typer.Option(
        None,
        "--show-universe1/--hide-universe1",
        help="Prefix universe 1 addresses with their universe.",
        rich_help_panel="Layout",
    ),
    separator: str | None = typer.Option(
        None,
        "--separator",
        help="Separator between universe and slot.",
        rich_help_panel="Layout",
    ),
    channel_display: ChannelDisplayChoice | None = typer.Option(
        None,
        "--channel-display",
        help="How to label multi-part channels.",
        rich_help_panel="Layout",
    ),
    columns: int | None = typer.Option(
        None,
        "--columns",
        min=1,
        help="Columns per patch page.",
        rich_help_panel="Layout",
    ),
    cover: bool | None = typer.Option(
        None,
        "--cover/--no-cover",
        help="Include the cover page.",
        rich_help_panel="Layout",
    ),
    group_by_type: bool | None = typer.Option(
        None,
        "--group-by-type/--no-group-by-type",
        help="Group the patch by fixture type.",
        rich_help_panel="Layout",
    ),
    cutting_list_by: CuttingListChoice | None = typer.Option(
        None,
        "--cutting-list-by",
        help="Group the cutting list by gel color or by fixture type.",
        rich_help_panel="Layout",
    ),
    targets: TargetChoice | None = typer.Option(
        None,
        "--targets",
        help="EOS target type to list.",
        rich_help_panel="Layout",
    ),
    hookup_columns: str | None = typer.Option(
        None,
        "--hookup-columns",
        help="Comma separated channel hookup columns, in order.",
        rich_help_panel="Columns",
    ),
    schedule_columns: str | None = typer.Option(
        None,
        "--schedule-columns",
        help="Comma separated hanging schedule columns, in order.",
        rich_help_panel="Columns",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_config(ctx)
        quiet_value = bool(_ctx_value(ctx, "quiet"))
        options = _report_options(
            config,
            orientation=orientation,
            address_mode=address_mode,
            show_universe1=show_universe1,
            universe_separator=separator,
            channel_display_mode=channel_display,
            column_count=columns,
            include_cover=cover,
            group_patch_by_type=group_by_type,
            cutting_list_by=cutting_list_by,
            target_filter=targets,
            hookup_columns=_column_list(hookup_columns),
            schedule_columns=_column_list(schedule_columns),
        )
        report_ids = _report_selection(report, include_all=include_all, config=config)
        snapshot = _load_show(show_file, quiet=quiet_value)

        if format == "pdf":
            ensure_playwright_browsers(quiet=quiet_value)
        with status(f"Rendering {format.upper()}...", quiet=quiet_value):
            result = export_reports(
                report_ids,
                snapshot,
                options,
                output,
                export_format=format,
                config=config,
            )

        included = {model.report_id for model in result.report.reports}
        for report_id in report_ids:
            if report_id not in included:
                _warn(f"skipped {report_id}: nothing to report", quiet=quiet_value)
        if quiet_value:
            return
        rows = [(model.label, f"{row_count(model)} rows") for model in result.report.reports]
        console.print(build_kv_table(rows, title=snapshot.show.name))
        console.print(str(result.path))

    _run_cli(_run, debug=debug_value)
