"""Mitten Index score calculation logic."""

import math

from ..config import CATEGORY_DEFAULT, CATEGORY_THRESHOLDS, FACTOR_WEIGHTS, SCORE_MAX, SCORE_MIN
from ..models import Category, MittenIndexResult, ScoreFactors, WeatherReading
from .factors import compute_factors
from .recommendations import recommend


def calculate_mitten_index(reading: WeatherReading) -> MittenIndexResult:
    """
    Score a weather reading.

    Args:
        reading: Current conditions, already validated by the caller.

    Returns:
        MittenIndexResult with the rounded score, category, factor
        breakdown, a one-line recommendation and dressing advice.
    """
    factors = compute_factors(reading)
    score = aggregate(factors)

    # Category and summary see the unrounded score; rounding happens once here
    category = categorize(score)
    summary, dressing = recommend(category, score)

    return MittenIndexResult(
        score=round_score(score),
        category=category,
        factors=factors,
        recommendation=summary,
        dressing=dressing,
    )


def aggregate(factors: ScoreFactors) -> float:
    """Weighted sum of the factors, clamped to [0, 100]. Not rounded."""
    score = (
        factors.temperature * FACTOR_WEIGHTS["temperature"]
        + factors.wind_chill * FACTOR_WEIGHTS["wind_chill"]
        + factors.humidity * FACTOR_WEIGHTS["humidity"]
        + factors.cloud_cover * FACTOR_WEIGHTS["cloud_cover"]
        - factors.sunlight * abs(FACTOR_WEIGHTS["sunlight"])
    )

    # max() then min() with the score first lets NaN through unchanged
    return min(max(score, SCORE_MIN), SCORE_MAX)


def categorize(score: float) -> Category:
    """Get category from score. Bands are half-open: 20 is chilly."""
    for cutoff, name in CATEGORY_THRESHOLDS:
        if score < cutoff:
            return Category(name)
    return Category(CATEGORY_DEFAULT)


def round_score(score: float) -> int | float:
    """Round half up to an int. NaN is returned as is."""
    if math.isnan(score):
        return score
    return math.floor(score + 0.5)
