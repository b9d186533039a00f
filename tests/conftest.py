"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from mitten_index.models import Coordinates, WeatherReading


def _reading(**overrides) -> WeatherReading:
    values = {
        "temperature_c": 20.0,
        "apparent_temperature_c": 20.0,
        "wind_speed_kmh": 5.0,
        "relative_humidity_pct": 50.0,
        "cloud_cover_pct": 20.0,
        "solar_radiation_wm2": 500.0,
        "observed_at": datetime(2024, 1, 1, 12, 0),
        "wind_direction_deg": 180.0,
    }
    values.update(overrides)
    return WeatherReading(**values)


@pytest.fixture
def make_reading():
    """Factory building a WeatherReading with mild defaults."""
    return _reading


@pytest.fixture
def pleasant_reading():
    """68°F, light wind, mostly sunny."""
    return _reading()


@pytest.fixture
def arctic_reading():
    """-22°F with a -58°F wind chill, overcast."""
    return _reading(
        temperature_c=-30.0,
        apparent_temperature_c=-50.0,
        wind_speed_kmh=50.0,
        relative_humidity_pct=90.0,
        cloud_cover_pct=100.0,
        solar_radiation_wm2=0.0,
        wind_direction_deg=0.0,
    )


@pytest.fixture
def minneapolis():
    """Coordinates for Minneapolis."""
    return Coordinates(latitude=44.9778, longitude=-93.265)


@pytest.fixture
def open_meteo_payload():
    """Open-Meteo current weather response body."""
    return {
        "latitude": 44.98,
        "longitude": -93.27,
        "current": {
            "time": "2024-01-01T12:00",
            "interval": 900,
            "temperature_2m": -15.0,
            "apparent_temperature": -25.0,
            "wind_speed_10m": 30.0,
            "wind_direction_10m": 270,
            "relative_humidity_2m": 80,
            "cloud_cover": 90,
            "direct_radiation": 0.0,
        },
        "current_units": {
            "temperature_2m": "°C",
            "apparent_temperature": "°C",
            "wind_speed_10m": "km/h",
            "wind_direction_10m": "°",
            "relative_humidity_2m": "%",
            "cloud_cover": "%",
        },
    }
