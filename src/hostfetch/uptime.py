"""Uptime probe."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from .exceptions import ParseFailure
from .models import Uptime
from .paths import SYSTEM_ROOT, uptime_file
from .records import parse_count
from .utils import read_source


def _whole_seconds(token: str) -> int:
    # fractional seconds are truncated, never rounded
    seconds = parse_count(token.split(".", 1)[0])
    if seconds is None:
        raise ParseFailure(f"uptime: cannot parse seconds from {token!r}")
    return seconds


def parse_uptime(content: str) -> Tuple[int, int]:
    """Parse ``"<uptime> <idle>"`` into whole ``(uptime, idle)`` seconds."""
    tokens = content.split()
    if len(tokens) < 2:
        raise ParseFailure(f"uptime: expected two values, got {content.strip()!r}")
    return _whole_seconds(tokens[0]), _whole_seconds(tokens[1])


class UptimeProbe:
    def __init__(self, root: Path = SYSTEM_ROOT) -> None:
        self._root = root

    def acquire(self) -> Uptime:
        uptime_seconds, idle_seconds = parse_uptime(read_source(uptime_file(self._root)))
        return Uptime(uptime_seconds=uptime_seconds, idle_seconds=idle_seconds)
