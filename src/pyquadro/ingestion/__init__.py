"""Ingestion layer.

Turns raw HID report buffers into typed snapshots and publishes them.
"""

from pyquadro.ingestion.apply import apply_report_to_store
from pyquadro.ingestion.report import FIELD_SPECS, MIN_REPORT_LENGTH, FieldSpec, decode_fields, decode_status_report

__all__ = [
    "FIELD_SPECS",
    "MIN_REPORT_LENGTH",
    "FieldSpec",
    "apply_report_to_store",
    "decode_fields",
    "decode_status_report",
]
