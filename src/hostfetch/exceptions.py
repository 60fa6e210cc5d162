"""Custom exception hierarchy."""

from __future__ import annotations


class HostfetchError(Exception):
    """Base exception for the hostfetch package."""


class ValidationError(HostfetchError):
    """Raised when configuration validation fails."""


class AcquisitionFailed(HostfetchError):
    """Raised when a probe cannot produce a complete record."""


class SourceUnavailable(AcquisitionFailed):
    """Raised when a pseudo-file is missing or cannot be read."""

    def __init__(self, path: object, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"{path}: source unavailable"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ParseFailure(AcquisitionFailed):
    """Raised when a source is readable but its content has the wrong shape."""
