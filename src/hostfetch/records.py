"""Scanning of line-oriented ``key<sep>value`` text."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple


def iter_fields(text: str, separator: str = ":") -> Iterator[Tuple[str, str]]:
    """Yield stripped ``(key, value)`` pairs, skipping lines without ``separator``."""
    for line in text.splitlines():
        if not line.strip() or separator not in line:
            continue
        key, value = line.split(separator, 1)
        yield key.strip(), value.strip()


def split_records(text: str, separator: str = ":") -> List[Dict[str, str]]:
    """Group fields into one mapping per blank-line separated block.

    Within a block the first occurrence of a key wins.
    """
    records: List[Dict[str, str]] = []
    current: Dict[str, str] = {}
    for line in text.splitlines():
        if not line.strip():
            if current:
                records.append(current)
                current = {}
            continue
        if separator not in line:
            continue
        key, value = line.split(separator, 1)
        current.setdefault(key.strip(), value.strip())
    if current:
        records.append(current)
    return records


def first_field(text: str, key: str, separator: str = ":") -> str | None:
    for field_key, value in iter_fields(text, separator):
        if field_key == key:
            return value
    return None


def parse_count(value: str | None) -> int | None:
    """Parse a plain decimal integer, returning ``None`` for anything else."""
    if value is None:
        return None
    value = value.strip()
    if not value or not value.isascii() or not value.isdigit():
        return None
    return int(value)
