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

import importlib.metadata
from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...config import PAPER_SIZES, AppConfig, load_app_config
from ...core.models import ShowSnapshot
from ...reports.options import ReportOptions
from ...reports.registry import REPORT_IDS, get_report
from ...store.show_file import SHOW_FILE_VERSION, is_newer_version, load_show
from ..api import configure_ui, console_err


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[yellow]Warning:[/yellow] {message}")


def _load_show(path: Path, *, quiet: bool) -> ShowSnapshot:
    snapshot = load_show(path)
    if is_newer_version(snapshot):
        _warn(
            f"show file version {snapshot.version} is newer than the supported version "
            f"{SHOW_FILE_VERSION}; unknown fields are ignored",
            quiet=quiet,
        )
    return snapshot


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _resolve_config_and_paper(
    ctx: typer.Context,
    config: str | None = None,
    paper: str | None = None,
) -> tuple[str | None, str | None]:
    config_value = config or _ctx_value(ctx, "config")
    paper_value = paper or _ctx_value(ctx, "paper")
    if config_value and paper_value:
        raise typer.BadParameter("use either --config or --paper, not both")
    return config_value, paper_value


def _load_config(ctx: typer.Context) -> AppConfig:
    config_value, paper_value = _resolve_config_and_paper(ctx)
    config = load_app_config(config_value, paper_size=paper_value)
    _apply_ui_defaults(ctx, config)
    return config


def _apply_ui_defaults(ctx: typer.Context, config: AppConfig) -> None:
    # [ui] settings can only switch output off; flags already given still win.
    ui = config.ui
    if ui.quiet and ctx.obj is not None:
        ctx.obj["quiet"] = True
    if ui.no_color or ui.no_animations:
        configure_ui(
            no_color=ui.no_color or bool(_ctx_value(ctx, "no_color")),
            no_animations=ui.no_animations or bool(_ctx_value(ctx, "no_animations")),
        )


def _paper_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().upper()
    if normalized not in PAPER_SIZES:
        raise typer.BadParameter("paper must be A4 or LETTER")
    return normalized


def _report_options(config: AppConfig, **overrides: Any) -> ReportOptions:
    """Apply command-line overrides (``None`` means "use the config value")."""
    options = config.report.to_options()
    changes = {key: value for key, value in overrides.items() if value is not None}
    if changes:
        options = replace(options, **changes)
    return options.validate()


def _column_list(value: str | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(part.strip().lower() for part in value.split(",") if part.strip())


def _report_selection(
    requested: Sequence[str] | None,
    *,
    include_all: bool,
    config: AppConfig,
) -> tuple[str, ...]:
    if include_all:
        if requested:
            raise typer.BadParameter("use either --report or --all, not both")
        return REPORT_IDS
    if not requested:
        return config.report.reports
    selected: list[str] = []
    for entry in requested:
        for report_id in entry.split(","):
            if not report_id.strip():
                continue
            definition = get_report(report_id)
            if definition.report_id not in selected:
                selected.append(definition.report_id)
    if not selected:
        raise ValueError("no reports selected")
    return tuple(selected)


def _get_version() -> str:
    try:
        return importlib.metadata.version("lxprint")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
