"""Device configuration for pyquadro."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyquadro._constants import PRODUCT_ID, STATUS_UPDATE_INTERVAL, VENDOR_ID
from pyquadro.exceptions import QuadroConfigError


def _env_int(name: str, value: str) -> int:
    """Parse an integer env value, accepting ``0x`` hex notation."""
    try:
        return int(value.strip(), 0)
    except ValueError as exc:
        raise QuadroConfigError(f"{name} must be an integer, got {value!r}") from exc


def _env_float(name: str, value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as exc:
        raise QuadroConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class QuadroConfig:
    """Device configuration.

    Parameters
    ----------
    vendor_id : int
        USB vendor ID used when no explicit *path* is given.
    product_id : int
        USB product ID used when no explicit *path* is given.
    path : bytes or None
        hidapi device path (as returned by :func:`pyquadro.discover_devices`).
        Takes precedence over vendor/product IDs so several controllers
        can be attached side by side.
    update_interval : float
        Freshness window in seconds.  Sensor reads fail with
        :class:`~pyquadro.exceptions.QuadroNoDataError` once the latest
        report is older than this.  Defaults to two report periods.
    read_size : int
        Maximum number of bytes requested per HID read.
    read_timeout_ms : int
        Timeout of a single blocking HID read.  Bounds how long
        stopping the reader thread can take.
    device_name : str or None
        Name used to scope diagnostics.  Defaults to the device path.
    """

    vendor_id: int = VENDOR_ID
    product_id: int = PRODUCT_ID
    path: bytes | None = None
    update_interval: float = STATUS_UPDATE_INTERVAL
    read_size: int = 512
    read_timeout_ms: int = 500
    device_name: str | None = None

    def __post_init__(self) -> None:
        if self.update_interval <= 0:
            raise QuadroConfigError(f"update_interval must be positive, got {self.update_interval}")
        if self.read_size <= 0:
            raise QuadroConfigError(f"read_size must be positive, got {self.read_size}")
        if self.read_timeout_ms <= 0:
            raise QuadroConfigError(f"read_timeout_ms must be positive, got {self.read_timeout_ms}")

    @classmethod
    def from_env(cls, **overrides: Any) -> QuadroConfig:
        """Create configuration from ``QUADRO_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        QuadroConfigError
            If an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_INT_MAP = {
            "QUADRO_VENDOR_ID": "vendor_id",
            "QUADRO_PRODUCT_ID": "product_id",
            "QUADRO_READ_SIZE": "read_size",
            "QUADRO_READ_TIMEOUT_MS": "read_timeout_ms",
        }
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_int(env_key, val)

        interval_env = env.get("QUADRO_UPDATE_INTERVAL")
        if interval_env is not None and "update_interval" not in overrides:
            config_kwargs["update_interval"] = _env_float("QUADRO_UPDATE_INTERVAL", interval_env)

        path_env = env.get("QUADRO_PATH")
        if path_env and "path" not in overrides:
            config_kwargs["path"] = path_env.encode()

        name_env = env.get("QUADRO_DEVICE_NAME")
        if name_env and "device_name" not in overrides:
            config_kwargs["device_name"] = name_env

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
