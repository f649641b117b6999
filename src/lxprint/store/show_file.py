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

"""Load show files into immutable snapshots."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from ..core.models import Instrument, ShowInfo, ShowSnapshot, Target

SHOW_FILE_VERSION = 1


def load_show(path: str | Path) -> ShowSnapshot:
    show_path = Path(path)
    try:
        text = show_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"show file is not UTF-8 text: {show_path}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"show file is not valid JSON: {show_path} ({exc.msg})") from exc
    if not isinstance(data, Mapping):
        raise ValueError("invalid show file format: expected a JSON object")
    return snapshot_from_mapping(data)


def snapshot_from_mapping(data: Mapping[str, object]) -> ShowSnapshot:
    instruments = data.get("instruments")
    if not isinstance(instruments, list):
        raise ValueError("invalid show file format: instruments must be a list")
    version = data.get("version")
    if not isinstance(version, int) or isinstance(version, bool):
        version = None

    metadata = data.get("metadata")
    show = ShowInfo.from_record(metadata) if isinstance(metadata, Mapping) else ShowInfo()

    targets = data.get("eosTargets", data.get("targets"))
    if targets is None:
        targets = []
    if not isinstance(targets, list):
        raise ValueError("invalid show file format: eosTargets must be a list")

    return ShowSnapshot(
        show=show,
        instruments=tuple(
            Instrument.from_record(_record(entry, field="instruments")) for entry in instruments
        ),
        targets=tuple(Target.from_record(_record(entry, field="eosTargets")) for entry in targets),
        version=version,
    )


def _record(entry: object, *, field: str) -> Mapping[str, object]:
    if not isinstance(entry, Mapping):
        raise ValueError(f"invalid show file format: {field} entries must be objects")
    return entry


def is_newer_version(snapshot: ShowSnapshot) -> bool:
    """True when the file was written by a newer exporter than this reader knows."""
    return snapshot.version is not None and snapshot.version > SHOW_FILE_VERSION
