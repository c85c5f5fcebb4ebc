from .wind_service import (
    DEFAULT_SOURCE,
    calculate_derived_wind_values,
    resolve_apparent_wind,
    solve_true_wind,
)
from .delta_service import DeltaSink, Measurement, create_measurements, create_wind_deltas

__all__ = [
    "DEFAULT_SOURCE",
    "calculate_derived_wind_values",
    "resolve_apparent_wind",
    "solve_true_wind",
    "DeltaSink",
    "Measurement",
    "create_measurements",
    "create_wind_deltas",
]
