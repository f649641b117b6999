#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Sequence
from contextlib import contextmanager

from rich import box
from rich.live import Live
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from .state import THEME, UIContext, get_context

DEFAULT_CONTEXT = get_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(
    *,
    no_color: bool,
    no_animations: bool,
    context: UIContext | None = None,
) -> None:
    context = _resolve_context(context)
    context.animations_enabled = not no_animations
    context.console.no_color = no_color
    context.console_err.no_color = no_color


@contextmanager
def status(message: str, *, quiet: bool, context: UIContext | None = None):
    context = _resolve_context(context)
    if quiet:
        yield None
        return
    if not context.animations_enabled:
        context.console.print(f"[subtitle]{message}[/subtitle]")
        yield None
        return
    spinner = Spinner("dots", text=Text(message, style="subtitle"))
    with Live(
        spinner,
        console=context.console,
        transient=False,
        refresh_per_second=12,
    ) as live:
        live.refresh()
        succeeded = False
        try:
            yield live
            succeeded = True
        finally:
            if succeeded:
                live.update(Text(f"✓ {message}", style="success"), refresh=True)
            else:
                live.update(Text(f"✗ {message}", style="error"), refresh=True)


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def build_table(
    headings: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    title: str | None = None,
    numeric: Sequence[int] = (),
) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAD, title_style="title", title_justify="left")
    for index, heading in enumerate(headings):
        table.add_column(heading, justify="right" if index in numeric else "left")
    for values in rows:
        table.add_row(*values)
    return table


def panel(title: str, renderable, *, style: str = "panel") -> Panel:
    return Panel(
        renderable,
        title=title,
        title_align="left",
        border_style=style,
        box=box.ROUNDED,
        padding=(1, 2),
    )


__all__ = [
    "THEME",
    "UIContext",
    "build_kv_table",
    "build_table",
    "configure_ui",
    "console",
    "console_err",
    "panel",
    "status",
]
