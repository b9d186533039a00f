"""Exception hierarchy for the Mitten Index.

MittenIndexError is the root. The scoring core never raises these; they
belong to the lookup layer around it, and the API and CLI translate each
category into a user-facing response.
"""


class MittenIndexError(Exception):
    """Root exception for the entire project."""


class ValidationError(MittenIndexError):
    """Malformed caller input: coordinates, postal code, empty query."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class LocationNotFoundError(MittenIndexError):
    """The geocoder has no match for the query."""


class UpstreamUnavailableError(MittenIndexError):
    """Provider error, timeout or unusable response. Retryable."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GeocodingError(UpstreamUnavailableError):
    """Geocoding provider failure."""


class WeatherAPIError(UpstreamUnavailableError):
    """Weather provider failure."""
