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
from rich.console import Group, RenderableType
from rich.markup import escape

from ...reports.assembler import assemble
from ...reports.types import (
    ChannelHookupContent,
    ChannelRow,
    CuttingList,
    EquipmentSummary,
    HangingScheduleContent,
    PatchContent,
    PowerSummary,
    ReportModel,
    TableColumn,
    TargetListContent,
)
from ..api import build_table, console, panel
from ..core.common import (
    _column_list,
    _ctx_value,
    _load_config,
    _load_show,
    _report_options,
    _run_cli,
    _warn,
)

OrientationChoice = Literal["portrait", "landscape"]
AddressModeChoice = Literal["universe", "absolute"]
ChannelDisplayChoice = Literal["parts", "dots", "hide", "raw"]
CuttingListChoice = Literal["color", "type"]
TargetChoice = Literal["all", "group", "preset", "sub"]

_PREVIEW_HELP = (
    "Print one report to the terminal.\n\n"
    "Examples:\n"
    "  lxprint preview patch show.json\n"
    "  lxprint preview channel-hookup show.json --channel-display dots\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_PREVIEW_HELP)(preview)


def preview(
    ctx: typer.Context,
    report_id: str = typer.Argument(..., help="Report id (see `lxprint list`)."),
    show_file: Path = typer.Argument(..., help="Show file (JSON) to read."),
    orientation: OrientationChoice | None = typer.Option(
        None,
        "--orientation",
        help="Page orientation (sets rows per patch column).",
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
            channel_display_mode=channel_display,
            column_count=columns,
            group_patch_by_type=group_by_type,
            cutting_list_by=cutting_list_by,
            target_filter=targets,
            hookup_columns=_column_list(hookup_columns),
            schedule_columns=_column_list(schedule_columns),
            include_cover=False,
        )
        snapshot = _load_show(show_file, quiet=quiet_value)
        model = assemble(report_id, snapshot, options)
        if model is None:
            _warn(f"{report_id}: nothing to report", quiet=quiet_value)
            return
        console.print(panel(f"{snapshot.show.name}: {model.label}", render_report(model)))

    _run_cli(_run, debug=debug_value)


def render_report(model: ReportModel) -> RenderableType:
    content = model.content
    if isinstance(content, ChannelHookupContent):
        return _channel_table(content.columns, content.rows)
    if isinstance(content, HangingScheduleContent):
        return Group(
            *(
                _channel_table(
                    content.columns,
                    group.rows,
                    title=f"{group.position} ({group.unit_count} units, {group.total_watts:,} W)",
                )
                for group in content.groups
            )
        )
    if isinstance(content, PatchContent):
        return Group(*(_patch_page(page, index) for index, page in enumerate(content.pages, 1)))
    if isinstance(content, EquipmentSummary):
        rows = [[escape(row.type), str(row.count)] for row in content.rows]
        rows.append(["[bold]Total[/bold]", f"[bold]{content.total}[/bold]"])
        return build_table(["Type", "Count"], rows, numeric=(1,))
    if isinstance(content, CuttingList):
        return Group(
            *(
                build_table(
                    [content.item_heading, "Frame Size", "Count"],
                    [
                        [escape(item.label), escape(item.frame_size), str(item.count)]
                        for item in group.items
                    ],
                    title=f"{escape(group.name)} ({group.count} cuts)",
                    numeric=(2,),
                )
                for group in content.groups
            ),
            f"{content.total_colors} colors, {content.total_cuts} cuts",
        )
    if isinstance(content, PowerSummary):
        rows = [[escape(row.position), str(row.count), f"{row.watts:,}"] for row in content.rows]
        rows.append(
            [
                "[bold]Total[/bold]",
                f"[bold]{content.total_devices}[/bold]",
                f"[bold]{content.total_watts:,}[/bold]",
            ]
        )
        return build_table(["Position", "Devices", "Watts"], rows, numeric=(1, 2))
    if isinstance(content, TargetListContent):
        return Group(
            *(
                build_table(
                    ["ID", "Label"],
                    [
                        [escape(target.target_id), escape(target.label or "")]
                        for target in section.targets
                    ],
                    title=section.title,
                )
                for section in content.sections
            )
        )
    raise TypeError(f"unsupported report content: {type(content).__name__}")


def _channel_table(
    columns: tuple[TableColumn, ...],
    rows: tuple[ChannelRow, ...],
    *,
    title: str | None = None,
):
    cells = []
    for row in rows:
        values = [escape(row.cell(column.key)) for column in columns]
        for index, column in enumerate(columns):
            if column.key == "channel" and values[index]:
                style = "part" if row.is_secondary_part else "channel"
                values[index] = f"[{style}]{values[index]}[/{style}]"
        cells.append(values)
    return build_table(
        [column.label for column in columns],
        cells,
        title=escape(title) if title else None,
    )


def _patch_page(page, number: int):
    headings: list[str] = []
    table_columns = []
    for column in page:
        headings.extend(["Ch", "Addr", "Type"])
        entries = []
        for row in column:
            if row.is_header:
                entries.append([f"[group]{escape(row.title)}[/group]", "", ""])
            else:
                style = "part" if row.is_secondary_part else "channel"
                entries.append(
                    [
                        f"[{style}]{escape(row.display_channel)}[/{style}]",
                        escape(row.display_address),
                        escape(row.cell("type")),
                    ]
                )
        table_columns.append(entries)

    depth = max((len(entries) for entries in table_columns), default=0)
    rows = []
    for index in range(depth):
        cells: list[str] = []
        for entries in table_columns:
            cells.extend(entries[index] if index < len(entries) else ["", "", ""])
        rows.append(cells)
    return build_table(headings, rows, title=f"Page {number}")
