"""State/store layer.

Holds the latest decoded snapshot per device and enforces the freshness
contract for sensor reads.
"""

from pyquadro.state.policy import is_stale
from pyquadro.state.store import Publication, SensorStore

__all__ = ["Publication", "SensorStore", "is_stale"]
