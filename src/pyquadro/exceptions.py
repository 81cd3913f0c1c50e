"""Custom exception hierarchy for pyquadro."""

from __future__ import annotations


class QuadroError(Exception):
    """Base exception for all pyquadro errors."""


class QuadroConfigError(QuadroError):
    """Invalid or missing configuration."""


class QuadroTransportError(QuadroError):
    """HID-level failure (device missing, open or read error)."""

    def __init__(self, message: str, *, path: bytes | None = None) -> None:
        self.path = path
        super().__init__(message)


class QuadroNoDataError(QuadroError):
    """No fresh sensor data is available.

    Raised when a sensor is read before the first status report arrived,
    or after the device stopped reporting for longer than the update
    interval.  Disconnection and transient delay are not distinguished;
    the next accepted report clears the condition.
    """

    def __init__(self, message: str, *, kind: str = "", channel: int | None = None) -> None:
        self.kind = kind
        self.channel = channel
        super().__init__(message)


class QuadroTimeoutError(QuadroError):
    """Timed out waiting for the next status report."""
