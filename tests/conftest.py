from __future__ import annotations

from collections.abc import Callable

import pytest

from pyquadro.ingestion.report import FIELD_SPECS

STATUS_REPORT_SIZE = 220

# Raw (device-unit) values for every field of a realistic report.
SAMPLE_FIELDS: dict[str, int] = {
    "serial_first_part": 3,
    "serial_second_part": 5,
    "firmware_version": 1013,
    "power_cycles": 0x00012345,
    "temp1": 240,
    "temp2": 251,
    "temp3": 2300,
    "temp4": 199,
    "flow_speed": 1234,
    "fan1_speed": 1500,
    "fan2_speed": 1510,
    "fan3_speed": 1200,
    "fan4_speed": 880,
    "fan1_power": 9,
    "fan2_power": 12,
    "fan3_power": 7,
    "fan4_power": 3,
    "vcc_voltage": 1205,
    "fan1_voltage": 1190,
    "fan2_voltage": 1180,
    "fan3_voltage": 1170,
    "fan4_voltage": 500,
    "fan1_current": 75,
    "fan2_current": 80,
    "fan3_current": 60,
    "fan4_current": 25,
}

ReportFactory = Callable[..., bytes]


def build_status_report(
    fields: dict[str, int] | None = None,
    *,
    report_id: int = 0x01,
    size: int = STATUS_REPORT_SIZE,
) -> bytes:
    data = bytearray(max(size, 1))
    data[0] = report_id
    values = fields or {}
    for spec in FIELD_SPECS:
        if spec.name in values and spec.end <= len(data):
            data[spec.offset : spec.end] = values[spec.name].to_bytes(spec.width, "big")
    return bytes(data[:size])


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def report_factory() -> ReportFactory:
    return build_status_report


@pytest.fixture
def sample_fields() -> dict[str, int]:
    return dict(SAMPLE_FIELDS)


@pytest.fixture
def sample_report() -> bytes:
    return build_status_report(SAMPLE_FIELDS)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
