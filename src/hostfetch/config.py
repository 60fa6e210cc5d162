"""Display configuration loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .exceptions import ValidationError
from .paths import SYSTEM_ROOT, default_config_file
from .utils import load_yaml

KNOWN_FIELDS: Tuple[str, ...] = ("cpu", "uptime", "idle", "os")
DEFAULT_FIELDS: Tuple[str, ...] = ("cpu", "uptime", "os")
DEFAULT_UNITS = 1

_ALLOWED_KEYS = {"units", "fields", "root", "template"}


@dataclass(slots=True)
class FetchConfig:
    units: int = DEFAULT_UNITS
    fields: List[str] = field(default_factory=lambda: list(DEFAULT_FIELDS))
    root: Path = SYSTEM_ROOT
    template: Path | None = None


def _resolve_path(value: Any, base: Path, context: str, key: str) -> Path:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{context}: '{key}' must be a non-empty string")
    path = Path(value).expanduser()
    return path if path.is_absolute() else base / path


def parse_config(payload: Dict[str, Any], context: str, base: Path | None = None) -> FetchConfig:
    unknown = sorted(set(payload) - _ALLOWED_KEYS)
    if unknown:
        raise ValidationError(f"{context}: unknown key(s) {', '.join(unknown)}")
    base = base or Path.cwd()
    config = FetchConfig()

    if "units" in payload:
        units = payload["units"]
        if isinstance(units, bool) or not isinstance(units, int):
            raise ValidationError(f"{context}: 'units' must be integer")
        config.units = units

    if "fields" in payload:
        fields_raw = payload["fields"]
        if not isinstance(fields_raw, list):
            raise ValidationError(f"{context}: 'fields' must be a list")
        fields: List[str] = []
        for idx, name in enumerate(fields_raw):
            if name not in KNOWN_FIELDS:
                raise ValidationError(
                    f"{context}: fields[{idx}] must be one of {', '.join(KNOWN_FIELDS)}, got {name!r}"
                )
            if name not in fields:
                fields.append(name)
        config.fields = fields

    if "root" in payload:
        config.root = _resolve_path(payload["root"], base, context, "root")
    if "template" in payload:
        config.template = _resolve_path(payload["template"], base, context, "template")
    return config


def load_config(path: Path | None = None) -> FetchConfig:
    """Load a config file; a missing default file means defaults."""
    explicit = path is not None
    path = path or default_config_file()
    if not path.exists():
        if explicit:
            raise ValidationError(f"{path}: config file not found")
        return FetchConfig()
    try:
        payload = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ValidationError(f"{path}: invalid YAML: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ValidationError(f"{path}: cannot read config: {exc}") from exc
    if payload is None:
        return FetchConfig()
    if not isinstance(payload, dict):
        raise ValidationError(f"{path}: expected mapping at root")
    return parse_config(payload, f"{path}", base=path.parent)
