"""Platform facade that dispatches to per-OS probes."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Protocol, TypeVar

from .cpu import CPUProbe
from .exceptions import AcquisitionFailed
from .models import CPUInfo, OSRelease, Uptime
from .osrelease import OSReleaseProbe
from .paths import SYSTEM_ROOT
from .uptime import UptimeProbe

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PlatformProbes(Protocol):
    """Capability interface implemented once per supported OS.

    Every method either returns a complete record or raises
    :class:`AcquisitionFailed`.
    """

    name: str

    def cpu_info(self) -> CPUInfo: ...

    def uptime(self) -> Uptime: ...

    def os_release(self) -> OSRelease: ...


class LinuxProbes:
    name = "linux"

    def __init__(self, root: Path = SYSTEM_ROOT) -> None:
        self.root = root
        self._cpu = CPUProbe(root)
        self._uptime = UptimeProbe(root)
        self._os_release = OSReleaseProbe(root)

    def cpu_info(self) -> CPUInfo:
        return self._cpu.acquire()

    def uptime(self) -> Uptime:
        return self._uptime.acquire()

    def os_release(self) -> OSRelease:
        return self._os_release.acquire()


class UnsupportedProbes:
    def __init__(self, name: str) -> None:
        self.name = name

    def _fail(self) -> AcquisitionFailed:
        return AcquisitionFailed(f"platform '{self.name}' is not supported")

    def cpu_info(self) -> CPUInfo:
        raise self._fail()

    def uptime(self) -> Uptime:
        raise self._fail()

    def os_release(self) -> OSRelease:
        raise self._fail()


PROBE_FACTORIES: Dict[str, Callable[[Path], PlatformProbes]] = {
    "linux": LinuxProbes,
    "android": LinuxProbes,
}


def detect_probes(platform_name: str | None = None, root: Path = SYSTEM_ROOT) -> PlatformProbes:
    platform_name = platform_name or sys.platform
    for prefix, factory in PROBE_FACTORIES.items():
        if platform_name.startswith(prefix):
            return factory(root)
    logger.debug("no probes registered for platform %s", platform_name)
    return UnsupportedProbes(platform_name)


class Platform:
    """Uniform acquisition interface; failed probes yield ``None``."""

    def __init__(self, probes: PlatformProbes | None = None) -> None:
        self._probes = probes or detect_probes()

    @property
    def probes(self) -> PlatformProbes:
        return self._probes

    def _acquire(self, label: str, acquire: Callable[[], T]) -> Optional[T]:
        try:
            return acquire()
        except AcquisitionFailed as exc:
            logger.debug("%s unavailable on %s: %s", label, self._probes.name, exc)
            return None

    def cpu_info(self) -> CPUInfo | None:
        return self._acquire("cpu info", self._probes.cpu_info)

    def uptime(self) -> Uptime | None:
        return self._acquire("uptime", self._probes.uptime)

    def os_release(self) -> OSRelease | None:
        return self._acquire("os release", self._probes.os_release)
