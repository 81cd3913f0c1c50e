"""Static channel table.

The table is device topology, not live data: labels and visibility never
depend on whether a report has been received.
"""

from __future__ import annotations

from pyquadro._constants import (
    LABEL_CURRENTS,
    LABEL_POWERS,
    LABEL_SPEEDS,
    LABEL_TEMPS,
    LABEL_VOLTAGES,
    READ_ONLY_MODE,
)
from pyquadro.models._base import QuadroBaseModel, SensorKind, check_channel


class ChannelInfo(QuadroBaseModel):
    """One exposed sensor channel."""

    kind: SensorKind
    channel: int
    label: str
    mode: int = READ_ONLY_MODE

    @property
    def hwmon_stem(self) -> str:
        """hwmon attribute stem, e.g. ``temp1``, ``fan5`` or ``in0``.

        hwmon numbers voltage inputs from zero and everything else from one.
        """
        index = self.channel if self.kind == SensorKind.VOLTAGE else self.channel + 1
        return f"{self.kind.hwmon_prefix}{index}"


_LABELS: dict[SensorKind, tuple[str, ...]] = {
    SensorKind.TEMPERATURE: LABEL_TEMPS,
    SensorKind.SPEED: LABEL_SPEEDS,
    SensorKind.POWER: LABEL_POWERS,
    SensorKind.VOLTAGE: LABEL_VOLTAGES,
    SensorKind.CURRENT: LABEL_CURRENTS,
}

# Canonical order: temperatures, speeds, powers, voltages, currents.
CHANNELS: tuple[ChannelInfo, ...] = tuple(
    ChannelInfo(kind=kind, channel=channel, label=label)
    for kind in SensorKind
    for channel, label in enumerate(_LABELS[kind])
)


def channel_label(kind: SensorKind | str, channel: int) -> str:
    parsed = check_channel(kind, channel)
    return _LABELS[parsed][channel]
