from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List

from derived_wind.models.wind import TrueWindResult

DEFAULT_CONTEXT = "vessels.self"

# Published paths, in publication order
WIND_PATHS = {
    "speed_apparent": "environment.wind.speedApparent",
    "angle_apparent": "environment.wind.angleApparent",
    "angle_true_ground": "environment.wind.angleTrueGround",
    "angle_true_water": "environment.wind.angleTrueWater",
    "direction_true": "environment.wind.directionTrue",
    "direction_magnetic": "environment.wind.directionMagnetic",
    "speed_true": "environment.wind.speedTrue",
}

COMFORT_PATHS = {
    "wind_chill": "environment.outside.tempest.observations.windChill",
    "heat_index": "environment.outside.tempest.observations.heatIndex",
    "feels_like": "environment.outside.tempest.observations.feelsLike",
}


@dataclass(frozen=True)
class Measurement:
    """A named value handed to the publication sink"""

    path: str
    value: float
    source: str
    timestamp: datetime


def create_measurements(result: TrueWindResult) -> List[Measurement]:
    """
    Flatten a derivation result into named measurements.

    All measurements share the result's source and timestamp. Comfort
    values that are None are left out.
    """
    measurements = []
    for paths in (WIND_PATHS, COMFORT_PATHS):
        for attribute, path in paths.items():
            value = getattr(result, attribute)
            if value is None:
                continue
            measurements.append(
                Measurement(
                    path=path,
                    value=value,
                    source=result.source,
                    timestamp=result.timestamp,
                )
            )
    return measurements


def to_delta(measurement: Measurement, context: str = DEFAULT_CONTEXT) -> Dict[str, Any]:
    """Wrap a measurement in a SignalK delta message"""
    return {
        "context": context,
        "updates": [
            {
                "$source": measurement.source,
                "timestamp": measurement.timestamp.isoformat(),
                "values": [{"path": measurement.path, "value": measurement.value}],
            }
        ],
    }


def create_wind_deltas(
    result: TrueWindResult, context: str = DEFAULT_CONTEXT
) -> List[Dict[str, Any]]:
    """Create one SignalK delta per published measurement"""
    return [to_delta(m, context) for m in create_measurements(result)]


class DeltaSink:
    """Adapts a SignalK delta publisher to the engine's measurement sink"""

    def __init__(
        self,
        publish: Callable[[Dict[str, Any]], None],
        context: str = DEFAULT_CONTEXT,
    ):
        """
        Args:
            publish: Called once per delta, in measurement order
            context: SignalK context the deltas are addressed to
        """
        self.publish = publish
        self.context = context

    def __call__(self, measurements: List[Measurement]) -> None:
        for measurement in measurements:
            self.publish(to_delta(measurement, self.context))
