"""Quadro status report decoder.

The Quadro pushes a HID input report with ID ``0x01`` about once per
second.  Fields sit at fixed offsets, big-endian, and are converted to the
units the rest of the library works in:

============  ==============================
group         conversion
============  ==============================
temperature   × 10 → millidegrees Celsius
flow          ÷ 10 → device-native count
fan speed     as-is (RPM)
power         × 10000 → microwatts
voltage       × 10 → millivolts
current       as-is (milliamps)
============  ==============================

Offsets count from byte 0 of the buffer, which holds the report ID.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass

from pyquadro import _constants as c
from pyquadro.models._base import SensorKind
from pyquadro.models.snapshot import SensorSnapshot, SerialNumber

_logger = logging.getLogger(__name__)

_FORMATS: dict[int, str] = {2: ">H", 4: ">I"}


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Location and conversion rule of one report field."""

    name: str
    offset: int
    width: int = 2
    multiplier: int = 1
    divisor: int = 1
    kind: SensorKind | None = None
    channel: int | None = None

    @property
    def end(self) -> int:
        return self.offset + self.width

    def decode(self, data: bytes | bytearray | memoryview) -> int:
        raw: int = struct.unpack_from(_FORMATS[self.width], data, self.offset)[0]
        return raw * self.multiplier // self.divisor


def _temp(channel: int, offset: int) -> FieldSpec:
    return FieldSpec(f"temp{channel + 1}", offset, multiplier=10, kind=SensorKind.TEMPERATURE, channel=channel)


def _speed(name: str, channel: int, offset: int, divisor: int = 1) -> FieldSpec:
    return FieldSpec(name, offset, divisor=divisor, kind=SensorKind.SPEED, channel=channel)


def _power(channel: int, offset: int) -> FieldSpec:
    return FieldSpec(f"fan{channel + 1}_power", offset, multiplier=10000, kind=SensorKind.POWER, channel=channel)


def _voltage(name: str, channel: int, offset: int) -> FieldSpec:
    return FieldSpec(name, offset, multiplier=10, kind=SensorKind.VOLTAGE, channel=channel)


def _current(channel: int, offset: int) -> FieldSpec:
    return FieldSpec(f"fan{channel + 1}_current", offset, kind=SensorKind.CURRENT, channel=channel)


FIELD_SPECS: tuple[FieldSpec, ...] = (
    # Info provided with every report
    FieldSpec("serial_first_part", c.SERIAL_FIRST_PART),
    FieldSpec("serial_second_part", c.SERIAL_SECOND_PART),
    FieldSpec("firmware_version", c.FIRMWARE_VERSION),
    FieldSpec("power_cycles", c.POWER_CYCLES, width=4),
    # Sensor readings
    _temp(0, c.TEMP1),
    _temp(1, c.TEMP2),
    _temp(2, c.TEMP3),
    _temp(3, c.TEMP4),
    _speed("flow_speed", 0, c.FLOW_SPEED, divisor=10),
    _speed("fan1_speed", 1, c.FAN1_SPEED),
    _speed("fan2_speed", 2, c.FAN2_SPEED),
    _speed("fan3_speed", 3, c.FAN3_SPEED),
    _speed("fan4_speed", 4, c.FAN4_SPEED),
    _power(0, c.FAN1_POWER),
    _power(1, c.FAN2_POWER),
    _power(2, c.FAN3_POWER),
    _power(3, c.FAN4_POWER),
    _voltage("vcc_voltage", 0, c.VCC_VOLTAGE),
    _voltage("fan1_voltage", 1, c.FAN1_VOLTAGE),
    _voltage("fan2_voltage", 2, c.FAN2_VOLTAGE),
    _voltage("fan3_voltage", 3, c.FAN3_VOLTAGE),
    _voltage("fan4_voltage", 4, c.FAN4_VOLTAGE),
    _current(0, c.FAN1_CURRENT),
    _current(1, c.FAN2_CURRENT),
    _current(2, c.FAN3_CURRENT),
    _current(3, c.FAN4_CURRENT),
)

MIN_REPORT_LENGTH: int = max(spec.end for spec in FIELD_SPECS)


def decode_fields(data: bytes | bytearray | memoryview) -> dict[str, int]:
    """Decode every field of *data* by name, without any validation."""
    return {spec.name: spec.decode(data) for spec in FIELD_SPECS}


def decode_status_report(data: bytes | bytearray | memoryview) -> SensorSnapshot | None:
    """Decode a raw status report.

    Returns ``None`` when *data* is not a status report (other report ID)
    or is too short to hold every field.  Neither case is an error: the
    device may send other report types, and a truncated buffer is simply
    dropped.
    """
    if len(data) == 0 or data[0] != c.STATUS_REPORT_ID:
        _logger.debug("Ignoring report id=%s", data[0] if len(data) else None)
        return None
    if len(data) < MIN_REPORT_LENGTH:
        _logger.debug("Ignoring short status report size=%d need=%d", len(data), MIN_REPORT_LENGTH)
        return None

    groups: dict[SensorKind, list[int]] = {kind: [0] * kind.channel_count for kind in SensorKind}
    identity: dict[str, int] = {}
    for spec in FIELD_SPECS:
        value = spec.decode(data)
        if spec.kind is None or spec.channel is None:
            identity[spec.name] = value
        else:
            groups[spec.kind][spec.channel] = value

    return SensorSnapshot(
        temperatures=tuple(groups[SensorKind.TEMPERATURE]),
        speeds=tuple(groups[SensorKind.SPEED]),
        powers=tuple(groups[SensorKind.POWER]),
        voltages=tuple(groups[SensorKind.VOLTAGE]),
        currents=tuple(groups[SensorKind.CURRENT]),
        serial_number=SerialNumber(
            first=identity["serial_first_part"],
            second=identity["serial_second_part"],
        ),
        firmware_version=identity["firmware_version"],
        power_cycles=identity["power_cycles"],
    )
