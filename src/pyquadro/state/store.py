"""Per-device sensor state store.

This is the only component holding mutable sensor state.  It is written
by exactly one producer (the report decoder, running on the transport's
reader thread) and read by any number of consumers.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from pyquadro._constants import READ_ONLY_MODE, STATUS_UPDATE_INTERVAL
from pyquadro.exceptions import QuadroNoDataError
from pyquadro.models._base import SensorKind, check_channel
from pyquadro.models.channels import channel_label
from pyquadro.models.snapshot import SensorSnapshot
from pyquadro.state.policy import is_stale


@dataclass(frozen=True, slots=True)
class Publication:
    """A snapshot together with the time it was accepted."""

    snapshot: SensorSnapshot
    updated_at: float | None


_INITIAL = Publication(snapshot=SensorSnapshot.empty(), updated_at=None)


class SensorStore:
    """Latest-sample store with a freshness contract.

    Publishing replaces a single immutable :class:`Publication` reference,
    so a reader sees either the previous or the new snapshot in full,
    never a mix of two reports.  Every query takes that reference exactly
    once.  The producer never waits on a lock.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        update_interval: float = STATUS_UPDATE_INTERVAL,
    ) -> None:
        self._clock = clock
        self._update_interval = update_interval
        self._publication = _INITIAL

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    @property
    def update_interval(self) -> float:
        return self._update_interval

    @property
    def last_update(self) -> float | None:
        """Clock value of the latest accepted report, ``None`` if none yet."""
        return self._publication.updated_at

    def publish(self, snapshot: SensorSnapshot, now: float | None = None) -> None:
        """Atomically replace the current snapshot and its timestamp."""
        self._publication = Publication(
            snapshot=snapshot,
            updated_at=self._clock() if now is None else now,
        )

    def is_stale(self, now: float | None = None) -> bool:
        current = self._publication
        return is_stale(self._now(now), current.updated_at, self._update_interval)

    def read(self, kind: SensorKind | str, channel: int, *, now: float | None = None) -> int:
        """Return the normalized value of one channel.

        Raises
        ------
        QuadroNoDataError
            If no report was accepted within the update interval.
        ValueError
            If *kind* or *channel* is not part of the channel table.
        """
        parsed = check_channel(kind, channel)
        current = self._publication
        if is_stale(self._now(now), current.updated_at, self._update_interval):
            raise QuadroNoDataError(
                f"No fresh data for {parsed} channel {channel}",
                kind=parsed.value,
                channel=channel,
            )
        return current.snapshot.values(parsed)[channel]

    def read_all(self, *, now: float | None = None) -> SensorSnapshot:
        """Return the whole current snapshot under the freshness check."""
        current = self._publication
        if is_stale(self._now(now), current.updated_at, self._update_interval):
            raise QuadroNoDataError("No fresh data")
        return current.snapshot

    def identity(self) -> SensorSnapshot:
        """Latest snapshot regardless of age, for identity fields."""
        return self._publication.snapshot

    def label(self, kind: SensorKind | str, channel: int) -> str:
        return channel_label(kind, channel)

    def is_visible(self, kind: SensorKind | str, channel: int) -> int:
        """File mode of a channel; every channel is read-only."""
        check_channel(kind, channel)
        return READ_ONLY_MODE

    def _now(self, now: float | None) -> float:
        return self._clock() if now is None else now
