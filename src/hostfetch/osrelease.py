"""OS release probe for ``os-release`` metadata."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Sequence

from .exceptions import ParseFailure, SourceUnavailable
from .models import OSRelease
from .paths import SYSTEM_ROOT, os_release_files
from .records import iter_fields
from .utils import read_source

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("NAME", "PRETTY_NAME")
_ESCAPABLE = {'"', "\\", "$", "`"}


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == "'":
        return value[1:-1]
    if len(value) >= 2 and value[0] == value[-1] == '"':
        inner = value[1:-1]
        chars = []
        index = 0
        while index < len(inner):
            char = inner[index]
            if char == "\\" and index + 1 < len(inner) and inner[index + 1] in _ESCAPABLE:
                chars.append(inner[index + 1])
                index += 2
                continue
            chars.append(char)
            index += 1
        return "".join(chars)
    return value


def parse_release_fields(content: str) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for key, value in iter_fields(content, "="):
        if key.startswith("#") or not key:
            continue
        fields[key] = _unquote(value)
    return fields


def parse_os_release(content: str) -> OSRelease:
    fields = parse_release_fields(content)
    missing = [key for key in _REQUIRED_KEYS if key not in fields]
    if missing:
        raise ParseFailure(f"os-release: missing required key(s) {', '.join(missing)}")
    return OSRelease(
        name=fields["NAME"],
        pretty_name=fields["PRETTY_NAME"],
        version=fields.get("VERSION"),
        version_id=fields.get("VERSION_ID"),
        version_codename=fields.get("VERSION_CODENAME"),
    )


class OSReleaseProbe:
    def __init__(self, root: Path = SYSTEM_ROOT, candidates: Sequence[Path] | None = None) -> None:
        self._candidates = tuple(candidates) if candidates is not None else os_release_files(root)

    def acquire(self) -> OSRelease:
        """Parse the first readable release file."""
        last_error: SourceUnavailable | None = None
        for path in self._candidates:
            try:
                content = read_source(path)
            except SourceUnavailable as exc:
                logger.debug("%s", exc)
                last_error = exc
                continue
            return parse_os_release(content)
        raise last_error or SourceUnavailable("os-release", "no candidate paths")
