"""Data models for hostfetch."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .duration import ONE_DAY, ONE_HOUR, ONE_MINUTE, ONE_MONTH, ONE_YEAR, format_duration

_ONE_DECIMAL = Decimal("0.1")


def _round_tenths(value: Decimal) -> float:
    return float(value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


@dataclass(slots=True, frozen=True)
class Frequency:
    """A clock frequency stored in KHz."""

    khz: int

    def as_mhz(self) -> float:
        return _round_tenths(Decimal(self.khz) / 1000)

    def as_ghz(self) -> float:
        return _round_tenths(Decimal(self.khz) / 1_000_000)


@dataclass(slots=True, frozen=True)
class CPUInfo:
    """Immutable snapshot of the host CPU."""

    brand: str
    physical_core_count: int
    logical_core_count: int
    frequency_khz: int  # instantaneous scaling frequency of cpu0

    @property
    def frequency(self) -> Frequency:
        return Frequency(self.frequency_khz)

    @property
    def frequency_mhz(self) -> float:
        return self.frequency.as_mhz()

    @property
    def frequency_ghz(self) -> float:
        return self.frequency.as_ghz()


@dataclass(slots=True, frozen=True)
class Uptime:
    """Immutable snapshot of system uptime.

    ``idle_seconds`` is summed across cores, so it can exceed
    ``uptime_seconds`` on multi-core hosts.
    """

    uptime_seconds: int
    idle_seconds: int

    @property
    def uptime_minutes(self) -> int:
        return self.uptime_seconds // ONE_MINUTE

    @property
    def uptime_hours(self) -> int:
        return self.uptime_seconds // ONE_HOUR

    @property
    def uptime_days(self) -> int:
        return self.uptime_seconds // ONE_DAY

    @property
    def uptime_months(self) -> int:
        return self.uptime_seconds // ONE_MONTH

    @property
    def uptime_years(self) -> int:
        return self.uptime_seconds // ONE_YEAR

    @property
    def idle_minutes(self) -> int:
        return self.idle_seconds // ONE_MINUTE

    @property
    def idle_hours(self) -> int:
        return self.idle_seconds // ONE_HOUR

    @property
    def idle_days(self) -> int:
        return self.idle_seconds // ONE_DAY

    @property
    def idle_months(self) -> int:
        return self.idle_seconds // ONE_MONTH

    @property
    def idle_years(self) -> int:
        return self.idle_seconds // ONE_YEAR

    def uptime_format(self, max_units: int = 6) -> str:
        return format_duration(self.uptime_seconds, max_units)

    def idle_format(self, max_units: int = 6) -> str:
        return format_duration(self.idle_seconds, max_units)


@dataclass(slots=True, frozen=True)
class OSRelease:
    """Identity of the installed distribution.

    Optional fields are ``None`` when the key is absent from the release
    metadata, which is how rolling distributions describe themselves.
    """

    name: str
    pretty_name: str
    version: str | None = None
    version_id: str | None = None
    version_codename: str | None = None

    @property
    def is_rolling(self) -> bool:
        return self.version_id is None
