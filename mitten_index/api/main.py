"""FastAPI entrypoint and HTTP routes."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import CACHE_CONTROL_GEOCODE, CACHE_CONTROL_WEATHER
from ..errors import LocationNotFoundError, UpstreamUnavailableError, ValidationError
from ..lookup import check_coordinates, check_location, parse_coordinates, resolve_location, validate_reading
from ..providers import fetch_current_weather
from ..utils import configure_logging

logger = logging.getLogger(__name__)


def create_app(log_level: str | None = None) -> FastAPI:
    """Initialise the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(log_level)
        yield

    app = FastAPI(title="Mitten Index API", version=__version__, lifespan=lifespan)

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(LocationNotFoundError)
    async def not_found_error(request: Request, exc: LocationNotFoundError) -> JSONResponse:
        return JSONResponse({"error": "Location not found"}, status_code=404)

    @app.exception_handler(UpstreamUnavailableError)
    async def upstream_error(request: Request, exc: UpstreamUnavailableError) -> JSONResponse:
        return JSONResponse(
            {"error": "Weather or geocoding service unavailable, try again later"},
            status_code=503,
            headers={"Retry-After": "30"},
        )

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""
        return {"status": "ok"}

    @app.get("/api/geocode", tags=["location"])
    def geocode(q: str | None = None) -> JSONResponse:
        """Resolve a ZIP code, place name or "lat,lon" pair to coordinates."""
        if not q or not q.strip():
            raise ValidationError("Missing query parameter 'q'", field="q")
        coordinates = resolve_location(q)
        return JSONResponse(coordinates.to_dict(), headers={"Cache-Control": CACHE_CONTROL_GEOCODE})

    @app.get("/api/weather", tags=["weather"])
    def weather(lat: str | None = None, lon: str | None = None) -> JSONResponse:
        """Current conditions at a coordinate pair."""
        coordinates = parse_coordinates(lat, lon)
        reading = validate_reading(fetch_current_weather(coordinates))
        return JSONResponse(reading.to_dict(), headers={"Cache-Control": CACHE_CONTROL_WEATHER})

    @app.get("/api/mitten-index", tags=["weather"])
    def mitten_index(
        lat: str | None = None,
        lon: str | None = None,
        q: str | None = None,
    ) -> JSONResponse:
        """Mitten Index for a coordinate pair, or for a location query when `q` is given."""
        if q is not None and lat is None and lon is None:
            result = check_location(q)
        else:
            result = check_coordinates(parse_coordinates(lat, lon))
        return JSONResponse(result, headers={"Cache-Control": CACHE_CONTROL_WEATHER})

    return app


app = create_app()  # uvicorn mitten_index.api.main:app
