from __future__ import annotations

import pytest

from pyquadro.config import QuadroConfig
from pyquadro.exceptions import QuadroConfigError


def test_defaults_target_quadro() -> None:
    config = QuadroConfig()

    assert config.vendor_id == 0x0C70
    assert config.product_id == 0xF00D
    assert config.update_interval == 2.0
    assert config.path is None


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("QUADRO_VENDOR_ID", "0x1234")
    monkeypatch.setenv("QUADRO_PRODUCT_ID", "4660")
    monkeypatch.setenv("QUADRO_PATH", "/dev/hidraw7")
    monkeypatch.setenv("QUADRO_UPDATE_INTERVAL", "5")
    monkeypatch.setenv("QUADRO_DEVICE_NAME", "loop-b")

    config = QuadroConfig.from_env()

    assert config.vendor_id == 0x1234
    assert config.product_id == 4660
    assert config.path == b"/dev/hidraw7"
    assert config.update_interval == 5.0
    assert config.device_name == "loop-b"


def test_overrides_win_over_env(monkeypatch) -> None:
    monkeypatch.setenv("QUADRO_UPDATE_INTERVAL", "5")
    monkeypatch.setenv("QUADRO_PATH", "/dev/hidraw7")

    config = QuadroConfig.from_env(update_interval=3.0, path=b"/dev/hidraw1")

    assert config.update_interval == 3.0
    assert config.path == b"/dev/hidraw1"


def test_invalid_env_value_raises_config_error(monkeypatch) -> None:
    monkeypatch.setenv("QUADRO_READ_SIZE", "lots")

    with pytest.raises(QuadroConfigError):
        QuadroConfig.from_env()


@pytest.mark.parametrize("field", ["update_interval", "read_size", "read_timeout_ms"])
def test_non_positive_values_rejected(field: str) -> None:
    with pytest.raises(QuadroConfigError):
        QuadroConfig(**{field: 0})
