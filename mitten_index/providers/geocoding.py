"""Location lookup against the Open-Meteo geocoding API."""

import logging
import re

import httpx

from ..config import GEOCODING_URL, HTTP_RETRIES, HTTP_TIMEOUT, KNOWN_CITIES, USER_AGENT
from ..errors import GeocodingError
from ..models import Coordinates

logger = logging.getLogger(__name__)


def geocode_location(query: str) -> Coordinates | None:
    """
    Geocode a ZIP code or place name to coordinates.

    Returns:
        Coordinates of the best match, or None if the geocoder has no match.

    Raises:
        GeocodingError: on timeout, connection failure, non-2xx status or an
            unreadable response body.
    """
    params = {
        "name": query.strip(),
        "count": 1,
        "language": "en",
        "format": "json",
    }

    try:
        with httpx.Client(
            timeout=HTTP_TIMEOUT,
            transport=httpx.HTTPTransport(retries=HTTP_RETRIES),
        ) as client:
            response = client.get(GEOCODING_URL, params=params, headers={"User-Agent": USER_AGENT})
            response.raise_for_status()
        data = response.json()

    except httpx.TimeoutException as e:
        logger.warning("Geocoding timeout for %r", query)
        raise GeocodingError("Geocoding service timed out") from e

    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning("Geocoding HTTP %s for %r", status, query)
        raise GeocodingError(f"Geocoding service returned HTTP {status}", status_code=status) from e

    except httpx.HTTPError as e:
        logger.warning("Geocoding request failed for %r: %s", query, e)
        raise GeocodingError(f"Geocoding service unavailable: {e}") from e

    except ValueError as e:
        raise GeocodingError("Geocoding service returned invalid JSON") from e

    if not isinstance(data, dict):
        raise GeocodingError("Geocoding service returned an unexpected payload")

    results = data.get("results") or []
    if not results:
        logger.info("No geocoding match for %r", query)
        return None

    first = results[0]
    try:
        return Coordinates(latitude=float(first["latitude"]), longitude=float(first["longitude"]))
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodingError("Geocoding result is missing coordinates") from e


def geocode_zip_code(zip_code: str) -> Coordinates | None:
    """
    Geocode a US ZIP code.

    Tries the bare digits first, then "<zip>, US". ZIP+4 input keeps its
    extra digits, as the geocoder accepts them.
    """
    clean_zip = re.sub(r"\D", "", zip_code)
    if len(clean_zip) < 5:
        return None

    coordinates = geocode_location(clean_zip)
    if coordinates:
        return coordinates

    return geocode_location(f"{clean_zip}, US")


def lookup_known_city(name: str) -> Coordinates | None:
    """Offline lookup for a handful of common cities."""
    known = KNOWN_CITIES.get(name.strip().lower())
    if known is None:
        return None
    latitude, longitude = known
    return Coordinates(latitude=latitude, longitude=longitude)
