"""Identity and diagnostics accessor.

Serial number, firmware version and power-cycle count are served from the
latest snapshot without the freshness check that guards sensor reads.
"""

from __future__ import annotations

from pyquadro._constants import DRIVER_NAME
from pyquadro.state.store import SensorStore


class DeviceDiagnostics:
    """Read-only identity entries scoped to one attached device."""

    ENTRIES: tuple[str, ...] = ("serial_number", "firmware_version", "power_cycles")

    def __init__(self, store: SensorStore, device_name: str) -> None:
        self._store = store
        self._device_name = device_name

    @property
    def directory_name(self) -> str:
        """Per-device scope name, e.g. ``aquacomputer-quadro-/dev/hidraw3``."""
        return f"{DRIVER_NAME}-{self._device_name}"

    def serial_number(self) -> str:
        return str(self._store.identity().serial_number)

    def firmware_version(self) -> str:
        return str(self._store.identity().firmware_version)

    def power_cycles(self) -> str:
        """How many times the device was powered on."""
        return str(self._store.identity().power_cycles)

    def as_dict(self) -> dict[str, str]:
        return {name: getattr(self, name)() for name in self.ENTRIES}
