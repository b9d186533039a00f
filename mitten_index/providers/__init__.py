"""Upstream provider clients."""

from .geocoding import geocode_location, geocode_zip_code, lookup_known_city
from .open_meteo import fetch_current_weather, parse_current_weather

__all__ = [
    "geocode_location",
    "geocode_zip_code",
    "lookup_known_city",
    "fetch_current_weather",
    "parse_current_weather",
]
