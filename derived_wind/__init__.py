"""
Derived Wind
True wind and comfort values from apparent wind and vessel navigation data.
"""

from .engine import WindEngine
from .models.vessel_state import NavigationField, NavigationUpdate, VesselState
from .models.wind import RawWindSample, TrueWindResult

__version__ = "0.1.0"

__all__ = [
    "WindEngine",
    "NavigationField",
    "NavigationUpdate",
    "VesselState",
    "RawWindSample",
    "TrueWindResult",
]
