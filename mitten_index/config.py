"""Configuration constants for the Mitten Index."""

import os

# Logging
LOG_LEVEL = os.environ.get("MITTEN_INDEX_LOG_LEVEL", "WARNING")

# Timeouts (seconds)
HTTP_TIMEOUT = 10
HTTP_RETRIES = 2  # connection retries only, not HTTP errors

# Rate limiting
DEFAULT_RATE_LIMIT = 5  # requests per second
DEFAULT_CONCURRENCY = 4  # parallel lookups

# User agent
USER_AGENT = "MittenIndex/1.0"

# Upstream providers
WEATHER_URL = os.environ.get(
    "MITTEN_INDEX_WEATHER_URL", "https://api.open-meteo.com/v1/forecast"
)
GEOCODING_URL = os.environ.get(
    "MITTEN_INDEX_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
)
CURRENT_WEATHER_FIELDS = [
    "temperature_2m",
    "apparent_temperature",
    "wind_speed_10m",
    "wind_direction_10m",
    "relative_humidity_2m",
    "cloud_cover",
    "direct_radiation",
]

# HTTP caching hints
CACHE_CONTROL_WEATHER = "public, max-age=300"
CACHE_CONTROL_GEOCODE = "public, max-age=86400"

# Unit conversion
KMH_TO_MPH = 0.621371

# Temperature factor: (min °F, factor), first match wins
TEMPERATURE_BANDS = (
    (50, 0),    # pleasant
    (32, 20),   # chilly
    (20, 40),   # cold
    (0, 60),    # very cold
    (-10, 80),  # brutal
)
TEMPERATURE_FACTOR_MAX = 100  # arctic

# Wind chill
WIND_CHILL_MIN_TEMP_F = 50  # wind ignored at or above
WIND_CHILL_FREEZING_F = 32
WIND_BANDS = (
    (25, 40),  # mph, contribution
    (15, 25),
    (10, 15),
    (5, 5),
)
WIND_GAP_MULTIPLIER = 2
WIND_GAP_CAP = 40
WIND_CHILL_CAP = 100
WIND_CHILL_ABOVE_FREEZING_CAP = 30

# Humidity: ignored at or above HUMIDITY_MAX_TEMP_F; otherwise (below °F, cap),
# first match wins, HUMIDITY_CAP_CHILLY when none match
HUMIDITY_MAX_TEMP_F = 40
HUMIDITY_CAPS = (
    (0, 30),
    (20, 20),
)
HUMIDITY_CAP_CHILLY = 10

# Sunlight
SOLAR_RADIATION_REFERENCE = 1000  # W/m², typical clear-sky peak
SOLAR_BONUS_CAP = 15

# Aggregate weights
FACTOR_WEIGHTS = {
    "temperature": 0.40,
    "wind_chill": 0.30,
    "humidity": 0.15,
    "cloud_cover": 0.10,
    "sunlight": -0.05,  # subtracted
}

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# Category thresholds: (below score, category name), arctic otherwise
CATEGORY_THRESHOLDS = (
    (20, "pleasant"),
    (40, "chilly"),
    (60, "cold"),
    (80, "brutal"),
)
CATEGORY_DEFAULT = "arctic"

# Summary index bucket
SUMMARY_BAND_WIDTH = 20
SUMMARY_STEP = 5

# Coordinates for common cities, used before hitting the geocoder
KNOWN_CITIES = {
    "minneapolis": (44.9778, -93.265),
    "st. paul": (44.9537, -93.09),
    "duluth": (46.7867, -92.1005),
    "chicago": (41.8781, -87.6298),
    "newyork": (40.7128, -74.006),
}
