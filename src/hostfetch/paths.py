"""Pseudo-file locations and shared path helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

SYSTEM_ROOT: Final[Path] = (
    Path(os.environ["HOSTFETCH_ROOT"]).expanduser().resolve()
    if "HOSTFETCH_ROOT" in os.environ
    else Path("/")
)


def cpuinfo_file(root: Path = SYSTEM_ROOT) -> Path:
    return root / "proc" / "cpuinfo"


def cpu_sys_dir(root: Path = SYSTEM_ROOT) -> Path:
    return root / "sys" / "devices" / "system" / "cpu"


def scaling_cur_freq_file(root: Path = SYSTEM_ROOT) -> Path:
    return cpu_sys_dir(root) / "cpu0" / "cpufreq" / "scaling_cur_freq"


def cgroup_cpu_max_file(root: Path = SYSTEM_ROOT) -> Path:
    return root / "sys" / "fs" / "cgroup" / "cpu.max"


def uptime_file(root: Path = SYSTEM_ROOT) -> Path:
    return root / "proc" / "uptime"


def os_release_files(root: Path = SYSTEM_ROOT) -> tuple[Path, ...]:
    return (root / "etc" / "os-release", root / "usr" / "lib" / "os-release")


def default_config_file() -> Path:
    if "HOSTFETCH_CONFIG" in os.environ:
        return Path(os.environ["HOSTFETCH_CONFIG"]).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME") or "~/.config"
    return Path(config_home).expanduser() / "hostfetch" / "config.yaml"
