"""Device context for one attached Quadro."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pyquadro._transport import HidReportReader, ReportReader
from pyquadro.config import QuadroConfig
from pyquadro.diagnostics import DeviceDiagnostics
from pyquadro.exceptions import QuadroError, QuadroTimeoutError
from pyquadro.hwmon import render_attributes
from pyquadro.ingestion.apply import apply_report_to_store
from pyquadro.models._base import SensorKind
from pyquadro.models.channels import CHANNELS, ChannelInfo
from pyquadro.models.snapshot import SensorSnapshot
from pyquadro.state.store import SensorStore

_logger = logging.getLogger(__name__)

ReaderFactory = Callable[[QuadroConfig, Callable[[bytes], Any]], ReportReader]


def _hid_reader_factory(config: QuadroConfig, on_report: Callable[[bytes], Any]) -> ReportReader:
    return HidReportReader(config, on_report=on_report)


@dataclass(slots=True)
class _UpdateWaiter:
    """A pending :meth:`QuadroDevice.wait_for_update` call."""

    loop: asyncio.AbstractEventLoop
    future: asyncio.Future[SensorSnapshot]


class QuadroDevice:
    """Telemetry context for one attached controller.

    Owns its own :class:`SensorStore`, so several devices can be attached
    at once.  Usage::

        with QuadroDevice(QuadroConfig.from_env()) as device:
            snapshot = await device.wait_for_update(timeout=3.0)
            rpm = device.read("speed", 1)
    """

    def __init__(
        self,
        config: QuadroConfig | None = None,
        *,
        reader_factory: ReaderFactory | None = None,
        clock: Callable[[], float] = time.monotonic,
        on_snapshot: Callable[[SensorSnapshot], None] | None = None,
    ) -> None:
        self._config = config or QuadroConfig()
        self._reader_factory = reader_factory or _hid_reader_factory
        self._store = SensorStore(clock=clock, update_interval=self._config.update_interval)
        self._diagnostics = DeviceDiagnostics(self._store, self.name)
        self._on_snapshot = on_snapshot
        self._reader: ReportReader | None = None
        self._waiters: list[_UpdateWaiter] = []

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> QuadroDevice:
        self.open()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def open(self) -> None:
        """Attach: start delivering reports into the store."""
        if self._reader is not None and self._reader.is_running:
            return
        reader = self._reader_factory(self._config, self.handle_raw_report)
        reader.start()
        self._reader = reader
        _logger.debug("Attached device=%s", self.name)

    def close(self) -> None:
        """Detach: stop the transport and fail pending waiters."""
        reader = self._reader
        self._reader = None
        if reader is not None:
            reader.stop()
            _logger.debug("Detached device=%s", self.name)
        error = QuadroError(f"Device {self.name} closed")
        for waiter in tuple(self._waiters):
            self._wake(waiter, self._fail_waiter, error)

    @property
    def is_open(self) -> bool:
        return self._reader is not None and self._reader.is_running

    @property
    def name(self) -> str:
        """Name used to scope diagnostics for this device."""
        if self._config.device_name:
            return self._config.device_name
        if self._config.path is not None:
            return self._config.path.decode(errors="replace")
        return f"{self._config.vendor_id:04x}:{self._config.product_id:04x}"

    @property
    def config(self) -> QuadroConfig:
        return self._config

    @property
    def store(self) -> SensorStore:
        return self._store

    @property
    def diagnostics(self) -> DeviceDiagnostics:
        return self._diagnostics

    # ------------------------------------------------------------------
    # Producer side
    # ------------------------------------------------------------------

    def handle_raw_report(self, data: bytes) -> bool:
        """Decode and publish one raw report; returns whether it was accepted.

        Called by the transport for every input report.  Never blocks and
        never raises for malformed input.
        """
        snapshot = apply_report_to_store(self._store, data)
        if snapshot is None:
            return False

        if self._on_snapshot is not None:
            try:
                self._on_snapshot(snapshot)
            except Exception:
                _logger.debug("on_snapshot callback failed", exc_info=True)

        for waiter in tuple(self._waiters):
            self._wake(waiter, self._resolve_waiter, snapshot)
        return True

    def _wake(self, waiter: _UpdateWaiter, callback: Callable[..., None], arg: Any) -> None:
        try:
            waiter.loop.call_soon_threadsafe(callback, waiter, arg)
        except RuntimeError:
            # Event loop already closed.
            _logger.debug("Dropping waiter on closed event loop", exc_info=True)
            self._discard_waiter(waiter)

    def _discard_waiter(self, waiter: _UpdateWaiter) -> None:
        with contextlib.suppress(ValueError):
            self._waiters.remove(waiter)

    @staticmethod
    def _resolve_waiter(waiter: _UpdateWaiter, snapshot: SensorSnapshot) -> None:
        if not waiter.future.done():
            waiter.future.set_result(snapshot)

    @staticmethod
    def _fail_waiter(waiter: _UpdateWaiter, error: QuadroError) -> None:
        if not waiter.future.done():
            waiter.future.set_exception(error)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def read(self, kind: SensorKind | str, channel: int) -> int:
        return self._store.read(kind, channel)

    def read_all(self) -> SensorSnapshot:
        return self._store.read_all()

    def label(self, kind: SensorKind | str, channel: int) -> str:
        return self._store.label(kind, channel)

    def is_visible(self, kind: SensorKind | str, channel: int) -> int:
        return self._store.is_visible(kind, channel)

    def channels(self) -> tuple[ChannelInfo, ...]:
        return CHANNELS

    def hwmon_attributes(self) -> dict[str, str | None]:
        return render_attributes(self._store)

    async def wait_for_update(self, timeout: float | None = None) -> SensorSnapshot:
        """Wait for the next accepted status report.

        Raises
        ------
        QuadroTimeoutError
            If no report is accepted within *timeout* seconds.
        QuadroError
            If the device is closed while waiting.
        """
        loop = asyncio.get_running_loop()
        waiter = _UpdateWaiter(loop=loop, future=loop.create_future())
        self._waiters.append(waiter)
        try:
            return await asyncio.wait_for(waiter.future, timeout)
        except TimeoutError as exc:
            raise QuadroTimeoutError(f"No status report from {self.name} within {timeout}s") from exc
        finally:
            self._discard_waiter(waiter)
