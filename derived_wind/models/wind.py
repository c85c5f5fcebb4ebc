from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RawWindSample:
    """Wind observation as reported by the anemometer"""

    speed: float  # m/s
    relative_angle_degrees: float  # degrees from bow, clockwise positive
    air_temperature: Optional[float] = None  # kelvin, when the report carries one


@dataclass(frozen=True)
class ApparentWind:
    """Apparent wind expressed relative to the bow and in both compass frames"""

    speed: float  # m/s
    relative_angle_degrees: float
    relative_angle_radians: Optional[float]
    true_bearing_degrees: float  # 0-360
    magnetic_bearing_degrees: float  # 0-360
    true_bearing_radians: float
    magnetic_bearing_radians: float
    air_temperature: float  # kelvin


@dataclass(frozen=True)
class MotionFrame:
    """
    Vessel motion used as the reference for true wind.

    Underway the frame follows the compass and speed over ground. At anchor
    the boat weathervanes, so both headings are the apparent wind bearing
    and the speed is zero.
    """

    heading_true: float  # radians
    heading_magnetic: float  # radians, course over ground when known
    speed: float  # m/s
    anchored: bool = False

    @classmethod
    def underway(
        cls, heading_true: float, heading_magnetic: float, speed: float
    ) -> "MotionFrame":
        return cls(heading_true, heading_magnetic, speed)

    @classmethod
    def at_anchor(cls, apparent_bearing: float) -> "MotionFrame":
        return cls(apparent_bearing, apparent_bearing, 0.0, anchored=True)


@dataclass(frozen=True)
class TrueWind:
    """True wind solved from apparent wind and vessel motion"""

    speed_apparent: float  # m/s
    angle_apparent: float  # radians (-π, π]
    angle_true_ground: float  # radians (-π, π]
    angle_true_water: float  # radians (-π, π]
    direction_true: float  # radians [0, 2π)
    direction_magnetic: float  # radians [0, 2π)
    speed_true: float  # m/s


@dataclass(frozen=True)
class TrueWindResult:
    """Derived wind and comfort values for one wind sample"""

    speed_apparent: float  # m/s
    angle_apparent: float  # radians (-π, π], relative to bow
    angle_true_ground: float  # radians (-π, π], relative to heading true
    angle_true_water: float  # radians (-π, π], relative to magnetic reference
    direction_true: float  # radians [0, 2π)
    direction_magnetic: float  # radians [0, 2π)
    speed_true: float  # m/s
    wind_chill: Optional[float]  # kelvin
    heat_index: Optional[float]  # kelvin
    feels_like: float  # kelvin
    timestamp: datetime
    source: str
