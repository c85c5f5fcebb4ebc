from dataclasses import dataclass
from typing import Optional

KELVIN_OFFSET = 273.15
MS_TO_KMH = 3.6

# Validity limits of the wind chill and heat index formulas
WIND_CHILL_MAX_TEMP_C = 10.0
WIND_CHILL_MIN_SPEED_KMH = 4.8
HEAT_INDEX_MIN_TEMP_F = 80.0
HEAT_INDEX_MIN_HUMIDITY = 40.0

# Feels-like switches to heat index only from this temperature upwards
FEELS_LIKE_HEAT_MIN_TEMP_C = 27.0


@dataclass(frozen=True)
class ComfortMetrics:
    """Container for comfort metric results"""

    wind_chill: Optional[float]  # kelvin, None when not applicable
    heat_index: Optional[float]  # kelvin, None when not applicable
    feels_like: float  # kelvin


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + KELVIN_OFFSET


def celsius_to_fahrenheit(celsius: float) -> float:
    return (celsius * 9 / 5) + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def calculate_wind_chill(
    wind_speed: float, air_temperature: float
) -> Optional[float]:
    """
    Calculate the Environment Canada wind chill index.

    Args:
        wind_speed: True wind speed in m/s
        air_temperature: Air temperature in kelvin

    Returns:
        Optional[float]: Wind chill in kelvin, or None outside
            T <= 10°C and V > 4.8 km/h
    """
    temp_c = kelvin_to_celsius(air_temperature)
    speed_kmh = wind_speed * MS_TO_KMH

    if temp_c > WIND_CHILL_MAX_TEMP_C or speed_kmh <= WIND_CHILL_MIN_SPEED_KMH:
        return None

    speed_factor = speed_kmh**0.16
    chill_c = (
        13.12
        + 0.6215 * temp_c
        - 11.37 * speed_factor
        + 0.3965 * temp_c * speed_factor
    )
    return celsius_to_kelvin(chill_c)


def calculate_heat_index(
    air_temperature: float, relative_humidity: float
) -> Optional[float]:
    """
    Calculate the heat index using the Rothfusz regression.

    Args:
        air_temperature: Air temperature in kelvin
        relative_humidity: Relative humidity in percent (0-100)

    Returns:
        Optional[float]: Heat index in kelvin, or None below 80°F or
            below 40% humidity
    """
    T = celsius_to_fahrenheit(kelvin_to_celsius(air_temperature))
    R = relative_humidity

    if T < HEAT_INDEX_MIN_TEMP_F or R < HEAT_INDEX_MIN_HUMIDITY:
        return None

    heat_index_f = (
        -42.379
        + 2.04901523 * T
        + 10.14333127 * R
        - 0.22475541 * T * R
        - 0.00683783 * T * T
        - 0.05481717 * R * R
        + 0.00122874 * T * T * R
        + 0.00085282 * T * R * R
        - 0.00000199 * T * T * R * R
    )
    return celsius_to_kelvin(fahrenheit_to_celsius(heat_index_f))


def select_feels_like(
    air_temperature: float,
    wind_chill: Optional[float],
    heat_index: Optional[float],
) -> float:
    """
    Pick the feels-like temperature.

    Wind chill wins at or below 10°C, heat index at or above 27°C.
    Anything in between reports the air temperature unchanged.
    """
    temp_c = kelvin_to_celsius(air_temperature)

    if wind_chill is not None and temp_c <= WIND_CHILL_MAX_TEMP_C:
        return wind_chill
    if heat_index is not None and temp_c >= FEELS_LIKE_HEAT_MIN_TEMP_C:
        return heat_index
    return air_temperature


def calculate_comfort_metrics(
    wind_speed: float, air_temperature: float, relative_humidity: float
) -> ComfortMetrics:
    """
    Calculate wind chill, heat index and feels-like temperature.

    Args:
        wind_speed: True wind speed in m/s
        air_temperature: Air temperature in kelvin
        relative_humidity: Relative humidity in percent (0-100)

    Returns:
        ComfortMetrics: All three metrics in kelvin
    """
    wind_chill = calculate_wind_chill(wind_speed, air_temperature)
    heat_index = calculate_heat_index(air_temperature, relative_humidity)
    return ComfortMetrics(
        wind_chill=wind_chill,
        heat_index=heat_index,
        feels_like=select_feels_like(air_temperature, wind_chill, heat_index),
    )
