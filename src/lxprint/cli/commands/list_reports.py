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

import typer

from ...reports.assembler import assemble, row_count
from ...reports.registry import REPORT_DEFINITIONS
from ..api import build_table, console
from ..core.common import _ctx_value, _load_config, _load_show, _report_options, _run_cli

_LIST_HELP = (
    "List report types, and with a show file, which of them have data.\n\n"
    "Examples:\n"
    "  lxprint list\n"
    "  lxprint list show.json\n"
)


def register(app: typer.Typer) -> None:
    app.command(name="list", help=_LIST_HELP)(list_reports)


def list_reports(
    ctx: typer.Context,
    show_file: Path | None = typer.Argument(None, help="Show file (JSON) to inspect."),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        if show_file is None:
            rows = [
                [definition.report_id, definition.label]
                for definition in REPORT_DEFINITIONS
            ]
            console.print(build_table(["Report", "Label"], rows, title="Reports"))
            return

        options = _report_options(_load_config(ctx))
        snapshot = _load_show(show_file, quiet=bool(_ctx_value(ctx, "quiet")))
        rows = []
        for definition in REPORT_DEFINITIONS:
            model = assemble(definition.report_id, snapshot, options)
            if model is None:
                rows.append([definition.report_id, definition.label, "[muted]empty[/muted]", "0"])
            else:
                rows.append(
                    [
                        definition.report_id,
                        definition.label,
                        "[success]ready[/success]",
                        str(row_count(model)),
                    ]
                )
        console.print(
            build_table(
                ["Report", "Label", "Status", "Rows"],
                rows,
                title=snapshot.show.name,
                numeric=(3,),
            )
        )

    _run_cli(_run, debug=debug_value)
