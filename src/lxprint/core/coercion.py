#!/usr/bin/env python3
from __future__ import annotations

import re

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_NATURAL_CHUNK_RE = re.compile(r"(\d+)")


def leading_int(value: object, *, default: int = 0) -> int:
    """Parse the leading integer of a value ("575W" -> 575), falling back to default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return default
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return default


def leading_float(value: object, *, default: float = 0.0) -> float:
    """Parse the leading number of a value ("12.5a" -> 12.5), falling back to default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
        if number != number:
            return default
        return number
    if isinstance(value, str):
        match = _LEADING_FLOAT_RE.match(value)
        if match:
            return float(match.group(1))
    return default


def optional_text(value: object) -> str | None:
    """Normalize a free-text field: numbers become labels, blanks become None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def optional_positive_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text.isdigit():
            return None
        value = int(text)
    if isinstance(value, int) and value > 0:
        return value
    return None


def natural_key(text: str) -> tuple[tuple[int, int | str], ...]:
    """Sort key that compares digit runs numerically ("Pipe 2" < "Pipe 10")."""
    parts: list[tuple[int, int | str]] = []
    for chunk in _NATURAL_CHUNK_RE.split(text):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk)))
        else:
            parts.append((1, chunk.casefold()))
    return tuple(parts)


def alpha_key(text: str) -> tuple[str, str]:
    return (text.casefold(), text)
