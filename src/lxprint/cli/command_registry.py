#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    export as export_command,
    list_reports as list_command,
    preview as preview_command,
)


def register(app: typer.Typer) -> None:
    export_command.register(app)
    list_command.register(app)
    preview_command.register(app)
