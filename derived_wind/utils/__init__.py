"""Utility functions for angle handling and comfort metrics."""

from .angle_utils import (
    deg_to_rad,
    rad_to_deg,
    normalize_angle,
    to_compass_bearing,
)
from .weather_utils import ComfortMetrics, calculate_comfort_metrics

__all__ = [
    "deg_to_rad",
    "rad_to_deg",
    "normalize_angle",
    "to_compass_bearing",
    "ComfortMetrics",
    "calculate_comfort_metrics",
]
