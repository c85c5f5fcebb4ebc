"""Models module containing core data structures."""

from .vessel_state import (
    NavigationField,
    NavigationUpdate,
    VesselState,
    VesselStateTracker,
)
from .wind import ApparentWind, MotionFrame, RawWindSample, TrueWind, TrueWindResult

__all__ = [
    "NavigationField",
    "NavigationUpdate",
    "VesselState",
    "VesselStateTracker",
    "ApparentWind",
    "MotionFrame",
    "RawWindSample",
    "TrueWind",
    "TrueWindResult",
]
