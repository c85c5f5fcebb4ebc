import math

TWO_PI = 2 * math.pi


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians"""
    return degrees * math.pi / 180


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees"""
    return radians * 180 / math.pi


def normalize_angle(angle: float) -> float:
    """
    Normalize an angle to the range (-π, π].

    +π is kept as +π, -π maps to +π.

    Args:
        angle: Angle in radians

    Returns:
        float: Equivalent angle in (-π, π]
    """
    angle = math.fmod(angle, TWO_PI)
    if angle > math.pi:
        angle -= TWO_PI
    elif angle <= -math.pi:
        angle += TWO_PI
    return angle


def to_compass_bearing(radians: float) -> float:
    """
    Convert an atan2 result in (-π, π] to a compass bearing in [0, 2π).

    Args:
        radians: Angle as returned by math.atan2

    Returns:
        float: Bearing in radians
    """
    if radians < 0:
        radians += TWO_PI
        # Tiny negative inputs round up to exactly 2π
        if radians >= TWO_PI:
            return 0.0
    return radians


def normalize_bearing_degrees(degrees: float) -> float:
    """Normalize a bearing to 0-360 degrees"""
    bearing = degrees % 360
    return 0.0 if bearing >= 360 else bearing
