import io
import json
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from hostfetch import __version__, cli
from hostfetch.cli import app

runner = CliRunner()


def test_fetch_prints_fields(fake_root: Path) -> None:
    result = runner.invoke(app, ["--root", str(fake_root)])
    assert result.exit_code == 0, result.output
    assert "cpu ~ AMD Ryzen 7 5700U, 2c/" in result.stdout
    assert "tm  ~ 55 minutes" in result.stdout
    assert "os  ~ Ubuntu 22.04.3 LTS" in result.stdout


def test_fetch_units_option(fake_root: Path) -> None:
    result = runner.invoke(app, ["--root", str(fake_root), "--units", "6"])
    assert result.exit_code == 0, result.output
    assert "tm  ~ 55 minutes, 23 seconds" in result.stdout


def test_fetch_omits_missing_fields(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--root", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == ""


def test_json_format(fake_root: Path) -> None:
    result = runner.invoke(app, ["--root", str(fake_root), "--format", "json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["uptime"]["uptime_seconds"] == 3323
    assert payload["os_release"]["version_codename"] == "jammy"


def test_template_format_with_config(fake_root: Path, tmp_path: Path) -> None:
    (tmp_path / "fetch.j2").write_text("{{ data.os_release.name }}|{{ lines | length }}\n", encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"root: {fake_root}\nfields: [os, uptime]\ntemplate: fetch.j2\n", encoding="utf-8"
    )
    result = runner.invoke(app, ["--config", str(config_path), "--format", "template"])
    assert result.exit_code == 0, result.output
    assert result.stdout == "Ubuntu|2\n"


def test_version() -> None:
    result = runner.invoke(app, ["-V"])
    assert result.exit_code == 0
    assert f"hostfetch {__version__}" in result.stdout


def test_help() -> None:
    result = runner.invoke(app, ["-h"])
    assert result.exit_code == 0
    assert "--units" in result.stdout


def test_unknown_argument() -> None:
    result = runner.invoke(app, ["--bogus"])
    assert result.exit_code != 0


def test_unknown_format(fake_root: Path) -> None:
    result = runner.invoke(app, ["--root", str(fake_root), "--format", "xml"])
    assert result.exit_code == 2


def test_invalid_config(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("units: many\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(config_path)])
    assert result.exit_code == 1


def test_unreadable_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_dir = tmp_path / "config.yaml"
    config_dir.mkdir()
    monkeypatch.setenv("HOSTFETCH_CONFIG", str(config_dir))
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "error:" in result.output


def test_template_output_is_not_highlighted(
    fake_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "fetch.j2").write_text("{{ data.uptime.uptime_seconds }} /etc/os-release\n", encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"root: {fake_root}\ntemplate: fetch.j2\n", encoding="utf-8")
    buffer = io.StringIO()
    monkeypatch.setattr(cli, "console", Console(file=buffer, force_terminal=True, color_system="standard"))
    result = runner.invoke(app, ["--config", str(config_path), "--format", "template"])
    assert result.exit_code == 0, result.output
    assert buffer.getvalue() == "3323 /etc/os-release\n"
