"""Current conditions from the Open-Meteo forecast API."""

import logging
from datetime import datetime

import httpx

from ..config import CURRENT_WEATHER_FIELDS, HTTP_RETRIES, HTTP_TIMEOUT, USER_AGENT, WEATHER_URL
from ..errors import WeatherAPIError
from ..models import Coordinates, WeatherReading

logger = logging.getLogger(__name__)


def fetch_current_weather(coordinates: Coordinates) -> WeatherReading:
    """
    Fetch current weather for a location.

    Raises:
        WeatherAPIError: on timeout, connection failure, non-2xx status or a
            body without the expected `current` fields.
    """
    params = {
        "latitude": str(coordinates.latitude),
        "longitude": str(coordinates.longitude),
        "current": ",".join(CURRENT_WEATHER_FIELDS),
        "timezone": "auto",
    }

    try:
        with httpx.Client(
            timeout=HTTP_TIMEOUT,
            transport=httpx.HTTPTransport(retries=HTTP_RETRIES),
        ) as client:
            response = client.get(WEATHER_URL, params=params, headers={"User-Agent": USER_AGENT})
            response.raise_for_status()
        data = response.json()

    except httpx.TimeoutException as e:
        logger.warning("Weather request timed out for %s", coordinates)
        raise WeatherAPIError("Weather service timed out") from e

    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning("Weather service HTTP %s for %s", status, coordinates)
        raise WeatherAPIError(f"Weather service returned HTTP {status}", status_code=status) from e

    except httpx.HTTPError as e:
        logger.warning("Weather request failed for %s: %s", coordinates, e)
        raise WeatherAPIError(f"Weather service unavailable: {e}") from e

    except ValueError as e:
        raise WeatherAPIError("Weather service returned invalid JSON") from e

    return parse_current_weather(data)


def parse_current_weather(data: dict) -> WeatherReading:
    """Map an Open-Meteo response body onto a WeatherReading."""
    try:
        current = data["current"]
        radiation = current.get("direct_radiation")
        direction = current.get("wind_direction_10m")
        observed = current.get("time")

        return WeatherReading(
            temperature_c=float(current["temperature_2m"]),
            apparent_temperature_c=float(current["apparent_temperature"]),
            wind_speed_kmh=float(current["wind_speed_10m"]),
            relative_humidity_pct=float(current["relative_humidity_2m"]),
            cloud_cover_pct=float(current["cloud_cover"]),
            solar_radiation_wm2=float(radiation) if radiation is not None else None,
            observed_at=datetime.fromisoformat(observed) if observed else None,
            wind_direction_deg=float(direction) if direction is not None else None,
        )

    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Malformed weather payload: %s", e)
        raise WeatherAPIError(f"Weather service returned an unexpected payload: {e}") from e
