from __future__ import annotations

from .ui import (
    THEME,
    build_kv_table,
    build_table,
    configure_ui,
    console,
    console_err,
    panel,
    status,
)

__all__ = [
    "THEME",
    "build_kv_table",
    "build_table",
    "configure_ui",
    "console",
    "console_err",
    "panel",
    "status",
]
