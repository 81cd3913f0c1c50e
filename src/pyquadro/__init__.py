"""pyquadro - read-only telemetry for the Aquacomputer Quadro fan controller."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyquadro")
except PackageNotFoundError:
    __version__ = "0+local"
from pyquadro._transport import HidDeviceInfo, HidReportReader, discover_devices
from pyquadro.config import QuadroConfig
from pyquadro.device import QuadroDevice
from pyquadro.diagnostics import DeviceDiagnostics
from pyquadro.exceptions import (
    QuadroConfigError,
    QuadroError,
    QuadroNoDataError,
    QuadroTimeoutError,
    QuadroTransportError,
)
from pyquadro.ingestion import FIELD_SPECS, FieldSpec, apply_report_to_store, decode_status_report
from pyquadro.models import CHANNELS, ChannelInfo, SensorKind, SensorSnapshot, SerialNumber
from pyquadro.state import SensorStore

__all__ = [
    "__version__",
    "CHANNELS",
    "ChannelInfo",
    "DeviceDiagnostics",
    "FIELD_SPECS",
    "FieldSpec",
    "HidDeviceInfo",
    "HidReportReader",
    "QuadroConfig",
    "QuadroConfigError",
    "QuadroDevice",
    "QuadroError",
    "QuadroNoDataError",
    "QuadroTimeoutError",
    "QuadroTransportError",
    "SensorKind",
    "SensorSnapshot",
    "SensorStore",
    "SerialNumber",
    "apply_report_to_store",
    "decode_status_report",
    "discover_devices",
]
