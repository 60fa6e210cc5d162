"""Compact human-readable durations."""

from __future__ import annotations

from typing import List, Tuple

ONE_MINUTE = 60
ONE_HOUR = ONE_MINUTE * 60
ONE_DAY = ONE_HOUR * 24
# Calendar-approximate: every month is 30 days and every year is 12 months.
ONE_MONTH = ONE_DAY * 30
ONE_YEAR = ONE_MONTH * 12

MIN_UNITS = 1
MAX_UNITS = 6

_UNITS: Tuple[Tuple[str, int], ...] = (
    ("year", ONE_YEAR),
    ("month", ONE_MONTH),
    ("day", ONE_DAY),
    ("hour", ONE_HOUR),
    ("minute", ONE_MINUTE),
    ("second", 1),
)


def clamp_units(max_units: int) -> int:
    return max(MIN_UNITS, min(MAX_UNITS, int(max_units)))


def decompose(total_seconds: int) -> List[Tuple[str, int]]:
    """Split a second count into (unit, value) pairs, largest unit first."""
    remaining = max(0, int(total_seconds))
    parts: List[Tuple[str, int]] = []
    for unit, size in _UNITS:
        value, remaining = divmod(remaining, size)
        parts.append((unit, value))
    return parts


def format_duration(total_seconds: int, max_units: int = MAX_UNITS) -> str:
    """Render ``total_seconds`` as e.g. ``"4 years, 3 months, 18 days"``.

    Zero-valued units are skipped and only the first ``max_units`` non-zero
    units are kept. ``max_units`` is clamped to ``[1, 6]``. A zero duration
    renders as the empty string.
    """
    limit = clamp_units(max_units)
    segments = [
        f"{value} {unit}{'' if value == 1 else 's'}"
        for unit, value in decompose(total_seconds)
        if value > 0
    ]
    return ", ".join(segments[:limit])
