"""Freshness policy for published sensor data."""

from __future__ import annotations


def is_stale(now: float, updated_at: float | None, interval: float) -> bool:
    """Return ``True`` when data published at *updated_at* must not be served.

    ``None`` means nothing was ever published.  The window is inclusive:
    data exactly *interval* seconds old is still fresh.
    """
    if updated_at is None:
        return True
    return now - updated_at > interval
