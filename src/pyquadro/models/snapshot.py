"""Decoded sensor snapshot."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, ValidationInfo, field_validator

from pyquadro.models._base import QuadroBaseModel, SensorKind

U16 = Annotated[int, Field(ge=0, le=0xFFFF)]
U32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]
NonNegative = Annotated[int, Field(ge=0)]


class SerialNumber(QuadroBaseModel):
    """Device serial number, transmitted as two 16-bit parts."""

    first: U16 = 0
    second: U16 = 0

    def __str__(self) -> str:
        return f"{self.first:05d}-{self.second:05d}"


class SensorSnapshot(QuadroBaseModel):
    """Unit-normalized sensor values from one status report.

    Attributes
    ----------
    temperatures
        Millidegrees Celsius, four sensors.
    speeds
        RPM.  Index 0 is the flow sensor in device-native counts
        (raw value divided by 10), indices 1-4 are fans.
    powers
        Microwatts, one per fan.
    voltages
        Millivolts.  Index 0 is the controller supply (VCC), 1-4 are fans.
    currents
        Milliamps, one per fan.
    serial_number, firmware_version, power_cycles
        Device identity, sent with every report.
    """

    temperatures: tuple[NonNegative, ...] = (0,) * 4
    speeds: tuple[NonNegative, ...] = (0,) * 5
    powers: tuple[NonNegative, ...] = (0,) * 4
    voltages: tuple[NonNegative, ...] = (0,) * 5
    currents: tuple[NonNegative, ...] = (0,) * 4
    serial_number: SerialNumber = Field(default_factory=SerialNumber)
    firmware_version: U16 = 0
    power_cycles: U32 = 0

    @field_validator("temperatures", "speeds", "powers", "voltages", "currents")
    @classmethod
    def _check_channel_count(cls, value: tuple[int, ...], info: ValidationInfo) -> tuple[int, ...]:
        kind = _FIELD_KINDS[info.field_name]
        if len(value) != kind.channel_count:
            raise ValueError(f"{info.field_name} needs {kind.channel_count} channels, got {len(value)}")
        return value

    @classmethod
    def empty(cls) -> SensorSnapshot:
        """All-zero snapshot used before the first report arrives."""
        return cls()

    def values(self, kind: SensorKind | str) -> tuple[int, ...]:
        """Return the channel values of one sensor kind."""
        return getattr(self, _KIND_FIELDS[SensorKind(kind)])


_KIND_FIELDS: dict[SensorKind, str] = {
    SensorKind.TEMPERATURE: "temperatures",
    SensorKind.SPEED: "speeds",
    SensorKind.POWER: "powers",
    SensorKind.VOLTAGE: "voltages",
    SensorKind.CURRENT: "currents",
}
_FIELD_KINDS: dict[str, SensorKind] = {field: kind for kind, field in _KIND_FIELDS.items()}
