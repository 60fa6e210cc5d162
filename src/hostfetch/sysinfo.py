"""Host snapshot collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import CPUInfo, OSRelease, Uptime
from .platforms import Platform


@dataclass(slots=True, frozen=True)
class HostSnapshot:
    cpu: CPUInfo | None = None
    uptime: Uptime | None = None
    os_release: OSRelease | None = None


def collect_sysinfo(platform: Platform | None = None, fields: Iterable[str] | None = None) -> HostSnapshot:
    """Acquire each requested record once; unavailable records stay ``None``."""
    platform = platform or Platform()
    wanted = set(fields) if fields is not None else {"cpu", "uptime", "idle", "os"}
    return HostSnapshot(
        cpu=platform.cpu_info() if "cpu" in wanted else None,
        uptime=platform.uptime() if wanted & {"uptime", "idle"} else None,
        os_release=platform.os_release() if "os" in wanted else None,
    )
