import unittest

from derived_wind.utils.weather_utils import (
    calculate_comfort_metrics,
    calculate_heat_index,
    calculate_wind_chill,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    select_feels_like,
)


class TestWindChill(unittest.TestCase):
    def test_computed_at_boundary(self):
        """10°C and 5.4 km/h satisfy both limits"""
        chill = calculate_wind_chill(1.5, 283.15)
        self.assertIsNotNone(chill)

        speed_factor = 5.4**0.16
        expected_c = 13.12 + 0.6215 * 10 - 11.37 * speed_factor + 0.3965 * 10 * speed_factor
        self.assertAlmostEqual(chill, expected_c + 273.15, places=6)

    def test_absent_below_speed_limit(self):
        self.assertIsNone(calculate_wind_chill(1.3, 283.15))

    def test_absent_above_temperature_limit(self):
        self.assertIsNone(calculate_wind_chill(10.0, celsius_to_kelvin(10.5)))

    def test_colder_with_more_wind(self):
        temp = celsius_to_kelvin(-5.0)
        light = calculate_wind_chill(3.0, temp)
        strong = calculate_wind_chill(15.0, temp)
        self.assertLess(strong, light)
        self.assertLess(light, temp)


class TestHeatIndex(unittest.TestCase):
    HOT = celsius_to_kelvin(fahrenheit_to_celsius(80))

    def test_computed_at_humidity_limit(self):
        self.assertIsNotNone(calculate_heat_index(self.HOT, 40))

    def test_absent_below_humidity_limit(self):
        self.assertIsNone(calculate_heat_index(self.HOT, 39))

    def test_absent_below_temperature_limit(self):
        self.assertIsNone(calculate_heat_index(celsius_to_kelvin(25.0), 80))

    def test_absent_just_below_80f(self):
        self.assertIsNone(
            calculate_heat_index(celsius_to_kelvin(fahrenheit_to_celsius(79.9)), 80)
        )

    def test_known_value(self):
        """90°F at 60% humidity"""
        temp = celsius_to_kelvin((90 - 32) * 5 / 9)
        heat_index = calculate_heat_index(temp, 60)
        heat_index_f = (heat_index - 273.15) * 9 / 5 + 32
        self.assertAlmostEqual(heat_index_f, 99.68, delta=0.05)


class TestFeelsLike(unittest.TestCase):
    def test_wind_chill_wins_when_cold(self):
        """Both values injected at 5°C: wind chill applies"""
        air = celsius_to_kelvin(5.0)
        self.assertEqual(select_feels_like(air, 270.0, 310.0), 270.0)

    def test_heat_index_when_hot(self):
        air = celsius_to_kelvin(30.0)
        self.assertEqual(select_feels_like(air, None, 310.0), 310.0)

    def test_neutral_band_keeps_air_temperature(self):
        air = celsius_to_kelvin(20.0)
        self.assertEqual(select_feels_like(air, 270.0, 310.0), air)

    def test_heat_index_ignored_below_27(self):
        air = celsius_to_kelvin(26.8)
        self.assertEqual(select_feels_like(air, None, 305.0), air)

    def test_defaults_to_air_temperature(self):
        self.assertEqual(select_feels_like(288.0, None, None), 288.0)


class TestComfortMetrics(unittest.TestCase):
    def test_cold_windy(self):
        metrics = calculate_comfort_metrics(8.0, celsius_to_kelvin(0.0), 50)
        self.assertIsNotNone(metrics.wind_chill)
        self.assertIsNone(metrics.heat_index)
        self.assertEqual(metrics.feels_like, metrics.wind_chill)

    def test_hot_humid(self):
        metrics = calculate_comfort_metrics(2.0, celsius_to_kelvin(32.0), 70)
        self.assertIsNone(metrics.wind_chill)
        self.assertIsNotNone(metrics.heat_index)
        self.assertEqual(metrics.feels_like, metrics.heat_index)

    def test_mild(self):
        air = celsius_to_kelvin(18.0)
        metrics = calculate_comfort_metrics(5.0, air, 60)
        self.assertIsNone(metrics.wind_chill)
        self.assertIsNone(metrics.heat_index)
        self.assertEqual(metrics.feels_like, air)


if __name__ == "__main__":
    unittest.main()
