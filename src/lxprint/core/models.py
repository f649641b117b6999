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

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from .coercion import optional_positive_int, optional_text

DEFAULT_SHOW_NAME = "Untitled Show"
DEFAULT_REPORT_FOOTER = "Made in LXLog"


class TargetType(str, Enum):
    GROUP = "Group"
    PRESET = "Preset"
    SUB = "Sub"


@dataclass(frozen=True)
class Instrument:
    """One physical fixture in the plot.

    ``channel`` is kept as a display label; numeric channels are normalized so
    ``12`` and ``12.0`` both read ``"12"``. ``part`` is ``None`` when the record
    does not carry a part number.
    """

    id: str | None = None
    channel: str | None = None
    part: int | None = None
    address: str | None = None
    universe: int | None = None
    position: str | None = None
    unit: str | None = None
    type: str | None = None
    watt: str | None = None
    purpose: str | None = None
    color: str | None = None
    gel_frame_size: str | None = None
    notes: str | None = None

    @property
    def effective_part(self) -> int:
        return self.part or 1

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> Instrument:
        return cls(
            id=optional_text(record.get("id")),
            channel=optional_text(record.get("channel")),
            part=optional_positive_int(record.get("part")),
            address=optional_text(record.get("address")),
            universe=optional_positive_int(record.get("universe")),
            position=optional_text(record.get("position")),
            unit=optional_text(record.get("unit")),
            type=optional_text(record.get("type")),
            watt=optional_text(record.get("watt")),
            purpose=optional_text(record.get("purpose")),
            color=optional_text(record.get("color")),
            gel_frame_size=optional_text(
                record.get("gelFrameSize", record.get("gel_frame_size"))
            ),
            notes=optional_text(record.get("notes")),
        )


@dataclass(frozen=True)
class Target:
    target_id: str
    target_type: TargetType | None
    label: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> Target:
        raw_type = optional_text(record.get("targetType", record.get("target_type")))
        target_type = None
        for candidate in TargetType:
            if raw_type == candidate.value:
                target_type = candidate
                break
        return cls(
            target_id=optional_text(record.get("targetId", record.get("target_id"))) or "",
            target_type=target_type,
            label=optional_text(record.get("label")),
        )


@dataclass(frozen=True)
class ShowInfo:
    name: str = DEFAULT_SHOW_NAME
    venue: str | None = None
    designer: str | None = None
    assistant: str | None = None
    director: str | None = None
    producer: str | None = None
    company: str | None = None
    custom_fields: tuple[tuple[str, str], ...] = ()
    report_footer: str | None = None
    # The metadata record had no name; display uses the default title.
    untitled: bool = False

    def staff(self) -> tuple[tuple[str, str], ...]:
        """Return the filled-in credits in print order."""
        entries = (
            ("Designer", self.designer),
            ("Assistant", self.assistant),
            ("Director", self.director),
            ("Producer", self.producer),
            ("Company", self.company),
        )
        return tuple((label, value) for label, value in entries if value)

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> ShowInfo:
        custom = record.get("customFields", record.get("custom_fields"))
        custom_fields: list[tuple[str, str]] = []
        if isinstance(custom, Mapping):
            for key, value in custom.items():
                text = optional_text(value)
                if text:
                    custom_fields.append((str(key), text))
        name = optional_text(record.get("name"))
        return cls(
            name=name or DEFAULT_SHOW_NAME,
            venue=optional_text(record.get("venue")),
            designer=optional_text(record.get("designer")),
            assistant=optional_text(record.get("assistant")),
            director=optional_text(record.get("director")),
            producer=optional_text(record.get("producer")),
            company=optional_text(record.get("company")),
            custom_fields=tuple(custom_fields),
            report_footer=optional_text(record.get("reportFooter", record.get("report_footer"))),
            untitled=not name,
        )


@dataclass(frozen=True)
class ShowSnapshot:
    """Read-only capture of the record store taken once per generation request."""

    show: ShowInfo = field(default_factory=ShowInfo)
    instruments: tuple[Instrument, ...] = ()
    targets: tuple[Target, ...] = ()
    # Version stamped in the show file, when it carries one.
    version: int | None = None
