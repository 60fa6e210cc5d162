"""CPU probe: brand, core topology and scaling frequency."""

from __future__ import annotations

import logging
import math
import os
import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from .exceptions import ParseFailure
from .models import CPUInfo
from .paths import SYSTEM_ROOT, cgroup_cpu_max_file, cpu_sys_dir, cpuinfo_file, scaling_cur_freq_file
from .records import first_field, parse_count, split_records
from .utils import read_optional, read_source

logger = logging.getLogger(__name__)

BRAND_SUFFIX_MARKER = " with"
DEFAULT_PHYSICAL_CORES = 1

_CPU_DIR_PATTERN = re.compile(r"cpu[0-9]+")

PhysicalCoreStrategy = Callable[[str, Path], Optional[int]]


def extract_brand(records: Sequence[Dict[str, str]]) -> str:
    """Return the first ``model name`` with any ``" with ..."`` suffix removed."""
    for record in records:
        brand = record.get("model name")
        if brand is not None:
            return brand.split(BRAND_SUFFIX_MARKER, 1)[0]
    raise ParseFailure("cpuinfo: no 'model name' field")


def parse_frequency_khz(content: str) -> int:
    khz = parse_count(content)
    if khz is None:
        raise ParseFailure(f"scaling_cur_freq: expected integer KHz, got {content.strip()!r}")
    return khz


def physical_cores_from_topology(cpuinfo: str, sys_dir: Path) -> int | None:
    """Count distinct ``core_id`` values across ``cpu<N>/topology`` entries."""
    if not sys_dir.is_dir():
        return None
    core_ids = set()
    try:
        entries = sorted(sys_dir.iterdir())
    except OSError as exc:
        logger.debug("cannot list %s: %s", sys_dir, exc)
        return None
    for entry in entries:
        if not _CPU_DIR_PATTERN.fullmatch(entry.name):
            continue
        core_id_path = entry / "topology" / "core_id"
        if not core_id_path.exists():
            continue
        content = read_optional(core_id_path)
        if content is None:
            return None
        core_ids.add(content.strip())
    return len(core_ids) or None


def physical_cores_from_cpuinfo(cpuinfo: str, sys_dir: Path) -> int | None:
    cores = parse_count(first_field(cpuinfo, "cpu cores"))
    if not cores:
        return None
    return cores


PHYSICAL_CORE_STRATEGIES: List[PhysicalCoreStrategy] = [
    physical_cores_from_topology,
    physical_cores_from_cpuinfo,
]


def physical_core_count(
    cpuinfo: str,
    sys_dir: Path,
    strategies: Sequence[PhysicalCoreStrategy] = PHYSICAL_CORE_STRATEGIES,
) -> int:
    """Try each strategy in order; fall back to a single core."""
    for strategy in strategies:
        count = strategy(cpuinfo, sys_dir)
        if count is not None:
            return count
        logger.debug("physical core strategy %s yielded nothing", strategy.__name__)
    return DEFAULT_PHYSICAL_CORES


def affinity_cpu_count() -> int | None:
    if hasattr(os, "sched_getaffinity"):
        try:
            count = len(os.sched_getaffinity(0))
            if count:
                return count
        except OSError as exc:
            logger.debug("sched_getaffinity failed: %s", exc)
    return os.cpu_count()


def parse_cgroup_quota(content: str) -> int | None:
    """Translate a cgroup v2 ``cpu.max`` line into a CPU limit.

    ``"max 100000"`` means unlimited; ``"150000 100000"`` allows two CPUs.
    """
    parts = content.split()
    if len(parts) != 2 or parts[0] == "max":
        return None
    quota, period = parse_count(parts[0]), parse_count(parts[1])
    if not quota or not period:
        return None
    return max(1, math.ceil(quota / period))


class CPUProbe:
    def __init__(
        self,
        root: Path = SYSTEM_ROOT,
        cpu_count: Callable[[], int | None] = affinity_cpu_count,
        strategies: Sequence[PhysicalCoreStrategy] = PHYSICAL_CORE_STRATEGIES,
    ) -> None:
        self._root = root
        self._cpu_count = cpu_count
        self._strategies = list(strategies)

    def logical_core_count(self) -> int:
        count = self._cpu_count()
        if not count:
            raise ParseFailure("host did not report a logical CPU count")
        quota_content = read_optional(cgroup_cpu_max_file(self._root))
        if quota_content is not None:
            limit = parse_cgroup_quota(quota_content)
            if limit is not None and limit < count:
                logger.debug("cgroup quota limits logical cores from %d to %d", count, limit)
                count = limit
        return count

    def acquire(self) -> CPUInfo:
        """Read and parse CPU sources; raises :class:`AcquisitionFailed`."""
        cpuinfo = read_source(cpuinfo_file(self._root))
        frequency = read_source(scaling_cur_freq_file(self._root))

        brand = extract_brand(split_records(cpuinfo))
        logical = self.logical_core_count()
        physical = physical_core_count(cpuinfo, cpu_sys_dir(self._root), self._strategies)
        khz = parse_frequency_khz(frequency)

        return CPUInfo(
            brand=brand,
            physical_core_count=physical,
            logical_core_count=logical,
            frequency_khz=khz,
        )
