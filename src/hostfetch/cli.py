"""Typer CLI for hostfetch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .config import load_config
from .exceptions import HostfetchError
from .platforms import Platform, detect_probes
from .reporting import render_json, render_template, render_text
from .sysinfo import collect_sysinfo

app = typer.Typer(
    help="Print a snapshot of this host's CPU, uptime and OS release.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
error_console = Console(stderr=True)

FORMATS = ("text", "json", "template")


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"hostfetch {__version__}")
        raise typer.Exit()


@app.command()
def fetch(
    units: Optional[int] = typer.Option(
        None, "--units", "-u", help="Maximum number of units in durations (1-6)"
    ),
    output_format: str = typer.Option(
        "text", "--format", "-f", help="Output format: text, json or template", case_sensitive=False
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", dir_okay=False, resolve_path=True, help="YAML config file"
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", file_okay=False, resolve_path=True, help="Filesystem root to inspect"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log probe fallbacks to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print version information",
    ),
) -> None:
    """Fetch host facts and print them."""
    _configure_logging(verbose)
    output_format = output_format.lower()
    if output_format not in FORMATS:
        error_console.print(f"[red]error:[/red] unknown format '{escape(output_format)}'")
        raise typer.Exit(code=2)

    try:
        config = load_config(config_path)
        if units is not None:
            config.units = units
        if root is not None:
            config.root = root
        platform = Platform(detect_probes(root=config.root))
        snapshot = collect_sysinfo(platform, config.fields)
        if output_format == "json":
            console.print_json(render_json(snapshot, config))
        elif output_format == "template":
            console.out(render_template(snapshot, config), end="", highlight=False)
        else:
            render_text(console, snapshot, config)
    except HostfetchError as exc:
        error_console.print(f"[red]error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
