"""Utility helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import SourceUnavailable

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """Read a pseudo-file in full, raising :class:`SourceUnavailable` on failure."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceUnavailable(path, "file-not-found") from exc
    except PermissionError as exc:
        raise SourceUnavailable(path, "permission-denied") from exc
    except UnicodeDecodeError as exc:
        raise SourceUnavailable(path, "not-utf8") from exc
    except OSError as exc:
        raise SourceUnavailable(path, exc.strerror or exc.__class__.__name__) from exc


def read_optional(path: Path) -> str | None:
    try:
        return read_source(path)
    except SourceUnavailable as exc:
        logger.debug("%s", exc)
        return None


def load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)

