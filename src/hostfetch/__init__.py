"""Host identity and activity facts for terminal fetch tools."""

from .duration import format_duration
from .exceptions import AcquisitionFailed, HostfetchError, ParseFailure, SourceUnavailable, ValidationError
from .models import CPUInfo, Frequency, OSRelease, Uptime
from .platforms import LinuxProbes, Platform, PlatformProbes, UnsupportedProbes, detect_probes

__version__ = "0.1.0"

__all__ = [
    "AcquisitionFailed",
    "CPUInfo",
    "Frequency",
    "HostfetchError",
    "LinuxProbes",
    "OSRelease",
    "ParseFailure",
    "Platform",
    "PlatformProbes",
    "SourceUnavailable",
    "UnsupportedProbes",
    "Uptime",
    "ValidationError",
    "__version__",
    "detect_probes",
    "format_duration",
]
