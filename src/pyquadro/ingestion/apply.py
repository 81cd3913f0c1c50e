"""Ingestion application helper.

Decodes a raw report and publishes the result into a
:class:`pyquadro.state.store.SensorStore` in one step.
"""

from __future__ import annotations

from pyquadro.ingestion.report import decode_status_report
from pyquadro.models.snapshot import SensorSnapshot
from pyquadro.state.store import SensorStore


def apply_report_to_store(
    store: SensorStore,
    data: bytes | bytearray | memoryview,
    *,
    now: float | None = None,
) -> SensorSnapshot | None:
    """Decode *data* and publish it.

    Returns the published snapshot, or ``None`` when the report was
    ignored, in which case the store is left untouched.
    """
    snapshot = decode_status_report(data)
    if snapshot is None:
        return None
    store.publish(snapshot, now)
    return snapshot
