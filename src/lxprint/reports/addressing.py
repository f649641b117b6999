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

import re
from typing import Final, Literal

AddressMode = Literal["universe", "absolute"]

ADDRESS_MODES: Final[tuple[str, ...]] = ("universe", "absolute")
SLOTS_PER_UNIVERSE: Final = 512

_COMPOSITE_SPLIT_RE = re.compile(r"[:/]")
_LEADING_DIGITS_RE = re.compile(r"^\s*([+-]?\d+)")


def format_address(
    address: object,
    universe: object = None,
    mode: str = "universe",
    show_universe1: bool = False,
    separator: str = "/",
) -> str:
    """Format a DMX address for display.

    ``address`` may be a slot within ``universe``, a bare absolute address
    (``513`` is universe 2 slot 1 when no universe is given) or an already
    composite ``"2:1"`` / ``"2/1"`` string. Unusable input yields ``""``.
    """
    if address is None or isinstance(address, bool):
        return ""
    text = str(address).strip()
    if not text:
        return ""

    resolved = _resolve(text, universe)
    if resolved is None:
        numeric_like = _COMPOSITE_SPLIT_RE.search(text) or _LEADING_DIGITS_RE.match(text)
        return "" if numeric_like or universe_is_invalid(universe) else text
    universe_number, slot = resolved

    if mode == "absolute":
        return str((universe_number - 1) * SLOTS_PER_UNIVERSE + slot)
    if universe_number == 1 and not show_universe1:
        return str(slot)
    return f"{universe_number}{separator}{slot}"


def absolute_address(address: object, universe: object = None) -> int:
    """Return the absolute slot number for sorting, 0 when unusable."""
    if address is None or isinstance(address, bool):
        return 0
    resolved = _resolve(str(address).strip(), universe)
    if resolved is None:
        return 0
    universe_number, slot = resolved
    return (universe_number - 1) * SLOTS_PER_UNIVERSE + slot


def universe_is_invalid(universe: object) -> bool:
    if universe is None:
        return False
    return _positive(universe) is None


def _resolve(text: str, universe: object) -> tuple[int, int] | None:
    if _COMPOSITE_SPLIT_RE.search(text):
        universe_text, _sep, slot_text = _split_composite(text)
        universe_number = _leading(universe_text) or 1
        slot = _leading(slot_text) or 0
        if universe_number < 1 or not 1 <= slot <= SLOTS_PER_UNIVERSE:
            return None
        return universe_number, slot

    number = _leading(text)
    if number is None or number < 1:
        return None
    if universe is None:
        return (number - 1) // SLOTS_PER_UNIVERSE + 1, (number - 1) % SLOTS_PER_UNIVERSE + 1
    universe_number = _positive(universe)
    if universe_number is None or number > SLOTS_PER_UNIVERSE:
        return None
    return universe_number, number


def _split_composite(text: str) -> tuple[str, str, str]:
    match = _COMPOSITE_SPLIT_RE.search(text)
    if match is None:
        return text, "", ""
    return text[: match.start()], match.group(0), text[match.end() :]


def _leading(text: str) -> int | None:
    match = _LEADING_DIGITS_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))


def _positive(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str):
        parsed = _leading(value)
        value = parsed if parsed is not None else value
    if isinstance(value, int) and value > 0:
        return value
    return None
