"""HID transport: device discovery and a threaded input-report reader."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

import hid

from pyquadro._constants import PRODUCT_ID, VENDOR_ID
from pyquadro.config import QuadroConfig
from pyquadro.exceptions import QuadroTransportError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HidDeviceInfo:
    """One enumerated HID interface."""

    path: bytes
    vendor_id: int
    product_id: int
    serial_number: str
    product_string: str
    interface_number: int

    @property
    def name(self) -> str:
        return self.path.decode(errors="replace")


def discover_devices(vendor_id: int = VENDOR_ID, product_id: int = PRODUCT_ID) -> list[HidDeviceInfo]:
    """List attached controllers matching *vendor_id*/*product_id*."""
    found: list[HidDeviceInfo] = []
    for entry in hid.enumerate(vendor_id, product_id):
        found.append(
            HidDeviceInfo(
                path=entry["path"],
                vendor_id=entry["vendor_id"],
                product_id=entry["product_id"],
                serial_number=entry.get("serial_number") or "",
                product_string=entry.get("product_string") or "",
                interface_number=entry.get("interface_number", -1),
            )
        )
    _logger.debug("Discovered %d device(s) for %04x:%04x", len(found), vendor_id, product_id)
    return found


class ReportReader(Protocol):
    """What :class:`pyquadro.device.QuadroDevice` needs from a transport."""

    @property
    def is_running(self) -> bool: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...


class HidReportReader:
    """Threaded hidapi reader that hands every input report to a callback.

    The callback runs on the reader thread and must not block.
    """

    def __init__(
        self,
        config: QuadroConfig,
        *,
        on_report: Callable[[bytes], Any],
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._on_report = on_report
        self._logger = logger or _logger
        self._device: Any = None
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    @property
    def is_running(self) -> bool:
        """Whether the reader thread is alive."""
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        """Open the device and start the reader thread."""
        self.stop()
        device = self._open()
        self._device = device
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            args=(device,),
            name=f"pyquadro-reader-{self._describe()}",
            daemon=True,
        )
        self._thread.start()
        self._logger.debug("HID reader started device=%s", self._describe())

    def stop(self) -> None:
        """Stop the reader thread and close the device."""
        thread = self._thread
        device = self._device
        self._thread = None
        self._device = None
        if thread is None:
            return
        self._stop_event.set()
        try:
            # A pending read returns within read_timeout_ms.
            thread.join(timeout=self._config.read_timeout_ms / 1000 + 1.0)
        finally:
            if device is not None:
                device.close()
            self._logger.debug("HID reader stopped device=%s", self._describe())

    def _describe(self) -> str:
        if self._config.path is not None:
            return self._config.path.decode(errors="replace")
        return f"{self._config.vendor_id:04x}:{self._config.product_id:04x}"

    def _open(self) -> Any:
        device = hid.device()
        try:
            if self._config.path is not None:
                device.open_path(self._config.path)
            else:
                device.open(self._config.vendor_id, self._config.product_id)
        except OSError as exc:
            raise QuadroTransportError(
                f"Could not open HID device {self._describe()}: {exc}",
                path=self._config.path,
            ) from exc
        return device

    def _run(self, device: Any) -> None:
        while not self._stop_event.is_set():
            try:
                data = device.read(self._config.read_size, self._config.read_timeout_ms)
            except (OSError, ValueError):
                if not self._stop_event.is_set():
                    self._logger.warning("HID read failed device=%s", self._describe(), exc_info=True)
                return
            if not data:
                continue
            try:
                self._on_report(bytes(data))
            except Exception:
                self._logger.debug("on_report callback failed", exc_info=True)
