"""Base model and sensor-kind enum.

Every pyquadro value model inherits from :class:`QuadroBaseModel`, which
makes instances immutable so a published snapshot can be shared with
concurrent readers without copying.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class SensorKind(StrEnum):
    """The sensor groups carried by a status report."""

    TEMPERATURE = "temperature"
    SPEED = "speed"
    POWER = "power"
    VOLTAGE = "voltage"
    CURRENT = "current"

    @property
    def channel_count(self) -> int:
        return _CHANNEL_COUNTS[self]

    @property
    def hwmon_prefix(self) -> str:
        """hwmon attribute type (``temp``, ``fan``, ``power``, ``in``, ``curr``)."""
        return _HWMON_PREFIXES[self]

    @property
    def unit(self) -> str:
        return _UNITS[self]


_CHANNEL_COUNTS: dict[SensorKind, int] = {
    SensorKind.TEMPERATURE: 4,
    SensorKind.SPEED: 5,
    SensorKind.POWER: 4,
    SensorKind.VOLTAGE: 5,
    SensorKind.CURRENT: 4,
}

_HWMON_PREFIXES: dict[SensorKind, str] = {
    SensorKind.TEMPERATURE: "temp",
    SensorKind.SPEED: "fan",
    SensorKind.POWER: "power",
    SensorKind.VOLTAGE: "in",
    SensorKind.CURRENT: "curr",
}

_UNITS: dict[SensorKind, str] = {
    SensorKind.TEMPERATURE: "m°C",
    SensorKind.SPEED: "RPM",
    SensorKind.POWER: "µW",
    SensorKind.VOLTAGE: "mV",
    SensorKind.CURRENT: "mA",
}


def check_channel(kind: SensorKind | str, channel: int) -> SensorKind:
    """Validate a ``(kind, channel)`` query and return the parsed kind.

    Raises :class:`ValueError` for an unknown kind or an out-of-range
    channel; both are caller bugs since the channel table is static.
    """
    parsed = SensorKind(kind)
    if not 0 <= channel < parsed.channel_count:
        raise ValueError(f"{parsed} channel must be between 0 and {parsed.channel_count - 1}, got {channel}")
    return parsed


class QuadroBaseModel(BaseModel):
    """Base for immutable pyquadro value models."""

    model_config = ConfigDict(frozen=True, extra="forbid")
