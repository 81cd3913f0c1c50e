"""hwmon-style attribute view of a sensor store.

Exposes the channel table under the attribute names the Linux hwmon
subsystem uses (``temp1_input``, ``fan1_label``, ``in0_input``...), so
consumers written against the kernel driver can read the same keys.
"""

from __future__ import annotations

from pyquadro.exceptions import QuadroNoDataError
from pyquadro.models.channels import CHANNELS, ChannelInfo
from pyquadro.state.store import SensorStore

_INPUT = "input"
_LABEL = "label"

_BY_STEM: dict[str, ChannelInfo] = {info.hwmon_stem: info for info in CHANNELS}


def attribute_names() -> list[str]:
    """Attribute names in canonical channel order."""
    names: list[str] = []
    for info in CHANNELS:
        names.append(f"{info.hwmon_stem}_{_INPUT}")
        names.append(f"{info.hwmon_stem}_{_LABEL}")
    return names


def _resolve(name: str) -> tuple[ChannelInfo, str]:
    stem, _, attr = name.partition("_")
    info = _BY_STEM.get(stem)
    if info is None or attr not in (_INPUT, _LABEL):
        raise KeyError(name)
    return info, attr


def read_attribute(store: SensorStore, name: str, *, now: float | None = None) -> str:
    """Read one attribute as text.

    Raises :class:`KeyError` for unknown names and
    :class:`~pyquadro.exceptions.QuadroNoDataError` for stale inputs.
    """
    info, attr = _resolve(name)
    if attr == _LABEL:
        return info.label
    return str(store.read(info.kind, info.channel, now=now))


def render_attributes(store: SensorStore, *, now: float | None = None) -> dict[str, str | None]:
    """Render every attribute from a single snapshot; stale inputs map to ``None``."""
    try:
        snapshot = store.read_all(now=now)
    except QuadroNoDataError:
        snapshot = None

    rendered: dict[str, str | None] = {}
    for info in CHANNELS:
        value = None if snapshot is None else str(snapshot.values(info.kind)[info.channel])
        rendered[f"{info.hwmon_stem}_{_INPUT}"] = value
        rendered[f"{info.hwmon_stem}_{_LABEL}"] = info.label
    return rendered
