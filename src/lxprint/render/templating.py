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

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

_TEMPLATES_ROOT = Path(__file__).parent.parent / "templates"


def _build_search_paths(template_dir: Path) -> tuple[Path, ...]:
    template_dir = template_dir.resolve()
    paths: list[Path] = [template_dir]
    # User templates can still include the packaged partials.
    if _TEMPLATES_ROOT.is_dir():
        packaged = _TEMPLATES_ROOT.resolve()
        if packaged not in paths:
            paths.append(packaged)
    return tuple(paths)


def _thousands(value: object) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "" if value is None else str(value)
    return f"{value:,}"


@lru_cache(maxsize=16)
def _get_env(template_dir: Path) -> Environment:
    search_paths = _build_search_paths(template_dir)
    env = Environment(
        loader=FileSystemLoader([str(path) for path in search_paths]),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        auto_reload=True,
    )
    env.filters["thousands"] = _thousands
    return env


def render_template(path: str | Path, context: dict[str, object]) -> str:
    template_path = Path(path)
    env = _get_env(template_path.parent.resolve())
    template = env.get_template(template_path.name)
    return template.render(**context)
