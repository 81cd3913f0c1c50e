"""Data models for decoded Quadro reports."""

from pyquadro.models._base import QuadroBaseModel, SensorKind, check_channel
from pyquadro.models.channels import CHANNELS, ChannelInfo, channel_label
from pyquadro.models.snapshot import SensorSnapshot, SerialNumber

__all__ = [
    "CHANNELS",
    "ChannelInfo",
    "QuadroBaseModel",
    "SensorKind",
    "SensorSnapshot",
    "SerialNumber",
    "channel_label",
    "check_channel",
]
