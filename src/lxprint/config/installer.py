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

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_TEMPLATE_PATH = PACKAGE_ROOT / "templates/report_document.html.j2"
PAPER_CONFIGS = {
    "A4": PACKAGE_ROOT / "config/a4.toml",
    "LETTER": PACKAGE_ROOT / "config/letter.toml",
}
DEFAULT_PAPER_SIZE = "A4"
DEFAULT_CONFIG_PATH = PAPER_CONFIGS[DEFAULT_PAPER_SIZE]
PAPER_SIZE_ENV = "LXPRINT_PAPER_SIZE"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


@dataclass(frozen=True)
class ConfigPaths:
    user_config_dir: Path
    user_templates_dir: Path
    user_paper_configs: dict[str, Path]
    user_template_path: Path
    user_required_files: tuple[Path, ...]


def _user_config_dir() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / "lxprint"
    if sys.platform == "darwin":
        return Path.home() / ".config" / "lxprint"
    return Path(user_config_dir("lxprint", appauthor=False))


def _build_paths() -> ConfigPaths:
    config_dir = _user_config_dir()
    templates_dir = config_dir / "templates"
    paper_configs = {key: config_dir / path.name for key, path in PAPER_CONFIGS.items()}
    template_path = templates_dir / DEFAULT_TEMPLATE_PATH.name
    return ConfigPaths(
        user_config_dir=config_dir,
        user_templates_dir=templates_dir,
        user_paper_configs=paper_configs,
        user_template_path=template_path,
        user_required_files=(*paper_configs.values(), template_path),
    )


def init_user_config() -> Path:
    paths = _build_paths()
    if not _ensure_user_config(paths):
        raise OSError(f"unable to create config dir at {paths.user_config_dir}")
    return paths.user_config_dir


def user_config_needs_init() -> bool:
    paths = _build_paths()
    return any(not path.exists() for path in paths.user_required_files)


def user_template_path() -> Path | None:
    """Return the user's copy of the report template when it exists."""
    path = _build_paths().user_template_path
    return path if path.is_file() else None


def resolve_config_path(path: str | Path | None = None, *, paper_size: str | None = None) -> Path:
    if path:
        return Path(path)

    paths = _build_paths()
    user_configs = {key: value for key, value in paths.user_paper_configs.items() if value.exists()}

    requested = paper_size or os.environ.get(PAPER_SIZE_ENV)
    if requested:
        key = requested.strip().upper()
        config_path = user_configs.get(key) or PAPER_CONFIGS.get(key)
        if not config_path:
            raise ValueError(f"unknown paper size: {requested}")
        return config_path

    return user_configs.get(DEFAULT_PAPER_SIZE) or DEFAULT_CONFIG_PATH


def _ensure_user_config(paths: ConfigPaths) -> bool:
    try:
        paths.user_config_dir.mkdir(parents=True, exist_ok=True)
        paths.user_templates_dir.mkdir(parents=True, exist_ok=True)
        _copy_if_missing(DEFAULT_TEMPLATE_PATH, paths.user_template_path)
        for key, src in PAPER_CONFIGS.items():
            _copy_if_missing(src, paths.user_paper_configs[key])
    except OSError:
        return False
    return True


def _copy_if_missing(source: Path, dest: Path) -> None:
    if dest.exists():
        return
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, dest)
