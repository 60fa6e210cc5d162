from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple

import pytest

CPUINFO_BLOCK = """processor\t: {index}
vendor_id\t: AuthenticAMD
cpu family\t: 23
model\t\t: 104
model name\t: AMD Ryzen 7 5700U with Radeon Graphics
stepping\t: 1
cpu MHz\t\t: 1775.083
cache size\t: 512 KB
physical id\t: 0
siblings\t: 16
core id\t\t: {core}
cpu cores\t: 8
flags\t\t: fpu vme de pse tsc msr pae mce cx8 apic sep
bogomips\t: 3593.04
power management: ts ttp tm hwpstate cpb eff_freq_ro [13] [14]
"""

CPUINFO = "\n".join(CPUINFO_BLOCK.format(index=i, core=i // 2) for i in range(4))

OS_RELEASE = """NAME="Ubuntu"
VERSION="22.04.3 LTS (Jammy Jellyfish)"
ID=ubuntu
ID_LIKE=debian
PRETTY_NAME="Ubuntu 22.04.3 LTS"
VERSION_ID="22.04"
VERSION_CODENAME=jammy
"""


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def add_topology(root: Path, core_ids: Iterable[Tuple[int, int]]) -> None:
    cpu_dir = root / "sys" / "devices" / "system" / "cpu"
    for cpu, core_id in core_ids:
        write(cpu_dir / f"cpu{cpu}" / "topology" / "core_id", f"{core_id}\n")


@pytest.fixture()
def fake_root(tmp_path: Path) -> Path:
    """A filesystem root shaped like a Linux host with 4 threads on 2 cores."""
    root = tmp_path / "root"
    write(root / "proc" / "cpuinfo", CPUINFO)
    write(root / "proc" / "uptime", "3323.71 36380.42\n")
    write(root / "etc" / "os-release", OS_RELEASE)
    cpu_dir = root / "sys" / "devices" / "system" / "cpu"
    write(cpu_dir / "cpu0" / "cpufreq" / "scaling_cur_freq", "1776664\n")
    add_topology(root, [(0, 0), (1, 0), (2, 1), (3, 1)])
    (cpu_dir / "cpuidle").mkdir()
    write(cpu_dir / "online", "0-3\n")
    return root


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOSTFETCH_CONFIG", str(tmp_path / "no-such-config.yaml"))
