"""Per-factor contributions derived from a weather reading."""

from ..config import (
    HUMIDITY_CAP_CHILLY,
    HUMIDITY_CAPS,
    HUMIDITY_MAX_TEMP_F,
    KMH_TO_MPH,
    SOLAR_BONUS_CAP,
    SOLAR_RADIATION_REFERENCE,
    TEMPERATURE_BANDS,
    TEMPERATURE_FACTOR_MAX,
    WIND_BANDS,
    WIND_CHILL_ABOVE_FREEZING_CAP,
    WIND_CHILL_CAP,
    WIND_CHILL_FREEZING_F,
    WIND_CHILL_MIN_TEMP_F,
    WIND_GAP_CAP,
    WIND_GAP_MULTIPLIER,
)
from ..models import ScoreFactors, WeatherReading


def compute_factors(reading: WeatherReading) -> ScoreFactors:
    """
    Derive the five factor contributions for a reading.

    Pure and total: any numeric input yields numeric output. Non-finite
    input is not rejected. A NaN temperature fails every band comparison,
    so it scores as the coldest temperature band, the chilly humidity cap
    and wind speed alone. NaN humidity or cloud cover shows up as NaN in
    the matching factor.
    """
    return ScoreFactors(
        temperature=temperature_factor(reading.temperature_c),
        wind_chill=wind_chill_factor(
            reading.temperature_c,
            reading.apparent_temperature_c,
            reading.wind_speed_kmh,
        ),
        humidity=humidity_factor(reading.temperature_c, reading.relative_humidity_pct),
        cloud_cover=reading.cloud_cover_pct,
        sunlight=sunlight_factor(reading.cloud_cover_pct, reading.solar_radiation_wm2),
    )


def temperature_factor(temp_c: float) -> float:
    """Colder is worse, in discrete Fahrenheit bands."""
    return _first_at_least(celsius_to_fahrenheit(temp_c), TEMPERATURE_BANDS, TEMPERATURE_FACTOR_MAX)


def wind_chill_factor(temp_c: float, apparent_temp_c: float, wind_speed_kmh: float) -> float:
    """
    Wind impact from wind speed and the actual/apparent temperature gap.

    The gap only counts below freezing; between freezing and 50°F only wind
    speed contributes, capped lower.
    """
    temp_f = celsius_to_fahrenheit(temp_c)
    if temp_f >= WIND_CHILL_MIN_TEMP_F:
        return 0

    apparent_f = celsius_to_fahrenheit(apparent_temp_c)
    wind_contribution = _first_at_least(kmh_to_mph(wind_speed_kmh), WIND_BANDS, 0)
    # NaN must stay in the first position of min() to propagate
    gap_contribution = min((temp_f - apparent_f) * WIND_GAP_MULTIPLIER, WIND_GAP_CAP)

    if temp_f < WIND_CHILL_FREEZING_F:
        return min(wind_contribution + gap_contribution, WIND_CHILL_CAP)

    return min(wind_contribution, WIND_CHILL_ABOVE_FREEZING_CAP)


def humidity_factor(temp_c: float, humidity_pct: float) -> float:
    """Damp cold feels worse; the colder it is the more humidity counts."""
    temp_f = celsius_to_fahrenheit(temp_c)
    if temp_f >= HUMIDITY_MAX_TEMP_F:
        return 0
    # NaN fails every cutoff and gets the chilly cap
    cap = _first_below(temp_f, HUMIDITY_CAPS, HUMIDITY_CAP_CHILLY)
    return min(humidity_pct / 100 * cap, cap)


def sunlight_factor(cloud_cover_pct: float, solar_radiation_wm2: float | None) -> float:
    """Cloud penalty minus a bonus for direct sun. Can go negative."""
    radiation_bonus = (
        min(solar_radiation_wm2 / SOLAR_RADIATION_REFERENCE * SOLAR_BONUS_CAP, SOLAR_BONUS_CAP)
        if solar_radiation_wm2 is not None
        else 0
    )
    return cloud_cover_pct - radiation_bonus


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def kmh_to_mph(kmh: float) -> float:
    return kmh * KMH_TO_MPH


def _first_at_least(value: float, bands, default):
    """Value of the first (cutoff, value) band with value >= cutoff."""
    for cutoff, band_value in bands:
        if value >= cutoff:
            return band_value
    return default


def _first_below(value: float, bands, default):
    """Value of the first (cutoff, value) band with value < cutoff."""
    for cutoff, band_value in bands:
        if value < cutoff:
            return band_value
    return default
