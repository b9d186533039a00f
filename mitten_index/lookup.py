"""Turn a user query into a scored Mitten Index result.

This is the boundary around the scoring core: it validates caller input,
resolves locations, fetches the reading and rejects unusable provider data
before anything is scored.
"""

import logging
import math
import re

from .errors import LocationNotFoundError, ValidationError, WeatherAPIError
from .models import Coordinates, WeatherReading
from .providers import fetch_current_weather, geocode_location, geocode_zip_code, lookup_known_city
from .scoring import calculate_mitten_index

logger = logging.getLogger(__name__)

ZIP_CODE_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")
COORDINATE_PAIR_PATTERN = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)\s*,\s*([-+]?\d+(?:\.\d+)?)\s*$")


def parse_coordinates(latitude, longitude) -> Coordinates:
    """
    Validate caller-supplied coordinates.

    Accepts numbers or numeric strings.

    Raises:
        ValidationError: if either value is missing, non-numeric, non-finite
            or outside the valid range.
    """
    if latitude is None or longitude is None or latitude == "" or longitude == "":
        raise ValidationError("Missing latitude or longitude parameters")

    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError) as e:
        raise ValidationError("Invalid latitude or longitude values") from e

    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValidationError("Invalid latitude or longitude values")
    if not -90 <= lat <= 90:
        raise ValidationError(f"Latitude out of range: {lat}", field="latitude")
    if not -180 <= lon <= 180:
        raise ValidationError(f"Longitude out of range: {lon}", field="longitude")

    return Coordinates(latitude=lat, longitude=lon)


def is_zip_code(query: str) -> bool:
    """Check if query looks like a US ZIP or ZIP+4 code."""
    return bool(ZIP_CODE_PATTERN.match(query.strip()))


def resolve_location(query: str) -> Coordinates:
    """
    Resolve a "lat,lon" pair, ZIP code or place name to coordinates.

    Raises:
        ValidationError: empty query or malformed coordinate pair.
        LocationNotFoundError: geocoder has no match.
        GeocodingError: geocoder unavailable.
    """
    query = (query or "").strip()
    if not query:
        raise ValidationError("Missing location query", field="q")

    pair = COORDINATE_PAIR_PATTERN.match(query)
    if pair:
        return parse_coordinates(pair.group(1), pair.group(2))

    if is_zip_code(query):
        coordinates = geocode_zip_code(query)
    else:
        coordinates = lookup_known_city(query) or geocode_location(query)

    if coordinates is None:
        raise LocationNotFoundError(f"Location not found: {query}")

    logger.debug("Resolved %r to %s", query, coordinates)
    return coordinates


def validate_reading(reading: WeatherReading) -> WeatherReading:
    """
    Reject provider readings the scoring core cannot use.

    Raises:
        WeatherAPIError: if a numeric field is non-finite or a
            non-negative field is negative.
    """
    required = {
        "temperature": reading.temperature_c,
        "apparent temperature": reading.apparent_temperature_c,
        "wind speed": reading.wind_speed_kmh,
        "humidity": reading.relative_humidity_pct,
        "cloud cover": reading.cloud_cover_pct,
    }
    if reading.solar_radiation_wm2 is not None:
        required["solar radiation"] = reading.solar_radiation_wm2

    for name, value in required.items():
        if not math.isfinite(value):
            raise WeatherAPIError(f"Weather service returned a non-numeric {name}")

    for name in ("wind speed", "solar radiation"):
        if name in required and required[name] < 0:
            raise WeatherAPIError(f"Weather service returned a negative {name}")

    return reading


def check_coordinates(coordinates: Coordinates) -> dict:
    """Fetch current weather for coordinates and score it."""
    reading = validate_reading(fetch_current_weather(coordinates))
    result = calculate_mitten_index(reading)

    logger.info(
        "Mitten Index %s (%s) at %s",
        result.score,
        result.category.value,
        coordinates,
    )

    return {
        **result.to_dict(),
        "weather": reading.to_dict(),
        "location": coordinates.to_dict(),
    }


def check_location(query: str) -> dict:
    """Resolve a location query, fetch its weather and score it."""
    coordinates = resolve_location(query)
    return {"query": query.strip(), **check_coordinates(coordinates)}
