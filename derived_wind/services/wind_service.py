import logging
import math
from datetime import UTC, datetime
from typing import Optional, Tuple

from derived_wind.models.vessel_state import VesselState
from derived_wind.models.wind import (
    ApparentWind,
    MotionFrame,
    RawWindSample,
    TrueWind,
    TrueWindResult,
)
from derived_wind.utils.angle_utils import (
    deg_to_rad,
    normalize_angle,
    normalize_bearing_degrees,
    rad_to_deg,
    to_compass_bearing,
)
from derived_wind.utils.weather_utils import calculate_comfort_metrics

DEFAULT_SOURCE = "mqtt-weatherflow-derived"


def resolve_apparent_wind(sample: RawWindSample, state: VesselState) -> ApparentWind:
    """
    Express a raw wind sample in the true and magnetic compass frames.

    Args:
        sample: Wind speed and bow-relative angle from the anemometer
        state: Vessel state snapshot

    Returns:
        ApparentWind: Bow-relative angle plus compass bearings (0-360)
    """
    relative_deg = sample.relative_angle_degrees

    true_deg = normalize_bearing_degrees(rad_to_deg(state.heading_true) + relative_deg)
    magnetic_deg = normalize_bearing_degrees(
        rad_to_deg(state.magnetic_reference) + relative_deg
    )

    air_temperature = sample.air_temperature
    if air_temperature is None:
        air_temperature = state.air_temperature

    return ApparentWind(
        speed=sample.speed,
        relative_angle_degrees=relative_deg,
        relative_angle_radians=deg_to_rad(relative_deg),
        true_bearing_degrees=true_deg,
        magnetic_bearing_degrees=magnetic_deg,
        true_bearing_radians=deg_to_rad(true_deg),
        magnetic_bearing_radians=deg_to_rad(magnetic_deg),
        air_temperature=air_temperature,
    )


def motion_frame(state: VesselState) -> MotionFrame:
    """Select the motion reference for a derivation"""
    if state.anchored:
        return MotionFrame.at_anchor(state.anchored_apparent_bearing)
    return MotionFrame.underway(
        state.heading_true, state.magnetic_reference, state.speed_over_ground
    )


def _true_wind_vector(
    wind_speed: float, wind_bearing: float, heading: float, vessel_speed: float
) -> Tuple[float, float]:
    """
    Add vessel velocity back onto the apparent wind vector.

    Args:
        wind_speed: Apparent wind speed in m/s
        wind_bearing: Apparent wind compass bearing in radians
        heading: Vessel heading in radians (same frame as wind_bearing)
        vessel_speed: Vessel speed in m/s

    Returns:
        Tuple[float, float]: (true wind speed, compass bearing in [0, 2π))
    """
    # Vessel velocity components
    vx = vessel_speed * math.cos(heading)
    vy = vessel_speed * math.sin(heading)

    # Apparent wind components
    ax = wind_speed * math.cos(wind_bearing)
    ay = wind_speed * math.sin(wind_bearing)

    wx = ax + vx
    wy = ay + vy

    speed = math.sqrt(wx * wx + wy * wy)
    direction = to_compass_bearing(math.atan2(wy, wx))
    return speed, direction


def solve_true_wind(apparent: ApparentWind, state: VesselState) -> TrueWind:
    """
    Calculate true wind in both compass frames.

    The true and magnetic frames are solved independently, so a changing
    magnetic variation never has to be known.

    Args:
        apparent: Resolved apparent wind
        state: Vessel state snapshot

    Returns:
        TrueWind: Speeds and normalized angles
    """
    frame = motion_frame(state)

    if apparent.relative_angle_radians is not None:
        angle_apparent = normalize_angle(apparent.relative_angle_radians)
    else:
        angle_apparent = normalize_angle(
            apparent.true_bearing_radians - frame.heading_true
        )

    speed_true, direction_true = _true_wind_vector(
        apparent.speed, apparent.true_bearing_radians, frame.heading_true, frame.speed
    )
    angle_true_ground = normalize_angle(direction_true - frame.heading_true)

    _, direction_magnetic = _true_wind_vector(
        apparent.speed,
        apparent.magnetic_bearing_radians,
        frame.heading_magnetic,
        frame.speed,
    )
    angle_true_water = normalize_angle(direction_magnetic - frame.heading_magnetic)

    return TrueWind(
        speed_apparent=apparent.speed,
        angle_apparent=angle_apparent,
        angle_true_ground=angle_true_ground,
        angle_true_water=angle_true_water,
        direction_true=direction_true,
        direction_magnetic=direction_magnetic,
        speed_true=speed_true,
    )


def calculate_derived_wind_values(
    apparent: ApparentWind,
    state: VesselState,
    source: str = DEFAULT_SOURCE,
    timestamp: Optional[datetime] = None,
) -> TrueWindResult:
    """
    Calculate true wind and comfort metrics for one apparent wind sample.

    Args:
        apparent: Resolved apparent wind
        state: Vessel state snapshot
        source: Source tag attached to published values
        timestamp: Capture time, defaults to now (UTC)

    Returns:
        TrueWindResult: Derived values ready for publication
    """
    if timestamp is None:
        timestamp = datetime.now(UTC)

    true_wind = solve_true_wind(apparent, state)
    comfort = calculate_comfort_metrics(
        true_wind.speed_true, apparent.air_temperature, state.relative_humidity
    )

    logging.debug(
        f"True wind: {true_wind.speed_true:.2f}m/s "
        f"from {math.degrees(true_wind.direction_true):.1f}°T "
        f"({math.degrees(true_wind.direction_magnetic):.1f}°M), "
        f"feels like {comfort.feels_like:.2f}K"
    )

    return TrueWindResult(
        speed_apparent=true_wind.speed_apparent,
        angle_apparent=true_wind.angle_apparent,
        angle_true_ground=true_wind.angle_true_ground,
        angle_true_water=true_wind.angle_true_water,
        direction_true=true_wind.direction_true,
        direction_magnetic=true_wind.direction_magnetic,
        speed_true=true_wind.speed_true,
        wind_chill=comfort.wind_chill,
        heat_index=comfort.heat_index,
        feels_like=comfort.feels_like,
        timestamp=timestamp,
        source=source,
    )
