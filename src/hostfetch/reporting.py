"""Rendering of host snapshots."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Tuple

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from rich.console import Console
from rich.markup import escape

from .config import FetchConfig
from .duration import format_duration
from .exceptions import ValidationError
from .sysinfo import HostSnapshot

LABELS: Dict[str, str] = {
    "cpu": "cpu",
    "uptime": "tm ",
    "idle": "idl",
    "os": "os ",
}


def format_cpu(snapshot: HostSnapshot) -> str | None:
    cpu = snapshot.cpu
    if cpu is None:
        return None
    return (
        f"{cpu.brand}, {cpu.physical_core_count}c/{cpu.logical_core_count}t, "
        f"{cpu.frequency_ghz} GHz"
    )


def text_lines(snapshot: HostSnapshot, config: FetchConfig) -> List[Tuple[str, str]]:
    """Return ``(label, value)`` pairs for every configured field with data."""
    lines: List[Tuple[str, str]] = []
    for name in config.fields:
        value: str | None = None
        if name == "cpu":
            value = format_cpu(snapshot)
        elif name == "uptime" and snapshot.uptime is not None:
            value = snapshot.uptime.uptime_format(config.units)
        elif name == "idle" and snapshot.uptime is not None:
            value = snapshot.uptime.idle_format(config.units)
        elif name == "os" and snapshot.os_release is not None:
            value = snapshot.os_release.pretty_name
        if value:
            lines.append((LABELS[name], value))
    return lines


def render_text(console: Console, snapshot: HostSnapshot, config: FetchConfig) -> None:
    for label, value in text_lines(snapshot, config):
        console.print(f"  [green]{escape(label)}[/green] ~ [white]{escape(value)}[/white]")


def snapshot_payload(snapshot: HostSnapshot, config: FetchConfig) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"cpu": None, "uptime": None, "os_release": None}
    if snapshot.cpu is not None:
        payload["cpu"] = {
            **asdict(snapshot.cpu),
            "frequency_mhz": snapshot.cpu.frequency_mhz,
            "frequency_ghz": snapshot.cpu.frequency_ghz,
        }
    if snapshot.uptime is not None:
        payload["uptime"] = {
            **asdict(snapshot.uptime),
            "uptime_text": snapshot.uptime.uptime_format(config.units),
            "idle_text": snapshot.uptime.idle_format(config.units),
        }
    if snapshot.os_release is not None:
        payload["os_release"] = {
            **asdict(snapshot.os_release),
            "is_rolling": snapshot.os_release.is_rolling,
        }
    return payload


def render_json(snapshot: HostSnapshot, config: FetchConfig) -> str:
    return json.dumps(snapshot_payload(snapshot, config), indent=2, sort_keys=True)


def _jinja_environment(template_dir: Path | None) -> Environment:
    loader = FileSystemLoader(str(template_dir)) if template_dir is not None else None
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["duration"] = format_duration
    return env


def render_template(snapshot: HostSnapshot, config: FetchConfig) -> str:
    context = {
        "snapshot": snapshot,
        "data": snapshot_payload(snapshot, config),
        "lines": text_lines(snapshot, config),
        "units": config.units,
    }
    template_path = config.template
    try:
        if template_path is None:
            env = _jinja_environment(None)
            template = env.from_string(_DEFAULT_TEMPLATE)
        else:
            env = _jinja_environment(template_path.parent)
            template = env.get_template(template_path.name)
        return template.render(**context)
    except TemplateError as exc:
        source = template_path or "built-in template"
        raise ValidationError(f"{source}: {exc.__class__.__name__}: {exc}") from exc


_DEFAULT_TEMPLATE = """{% for label, value in lines %}
  {{ label }} ~ {{ value }}
{% endfor %}
"""
