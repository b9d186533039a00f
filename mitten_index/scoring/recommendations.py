"""Clothing guidance for each Mitten Index category."""

import math
from types import MappingProxyType

from ..config import SUMMARY_BAND_WIDTH, SUMMARY_STEP
from ..models import Category, DressingAdvice


# One-line summaries, picked by the score's position inside its band
RECOMMENDATIONS = MappingProxyType({
    Category.PLEASANT: (
        "Light jacket or sweater should be fine",
        "You might not even need a jacket if you're moving around",
    ),
    Category.CHILLY: (
        "Grab a jacket or light coat",
        "Maybe a hat if you're sensitive to cold",
    ),
    Category.COLD: (
        "Wear a warm coat",
        "Hat and gloves recommended",
        "Consider layers",
    ),
    Category.BRUTAL: (
        "Heavy winter coat essential",
        "Wear multiple layers",
        "Hat, gloves, and scarf required",
        "Consider long underwear",
        "Protect exposed skin",
    ),
    Category.ARCTIC: (
        "Full winter gear required",
        "Multiple layers including base layer",
        "Heavy coat, hat, gloves, scarf, face protection",
        "Limit time outdoors",
        "Consider hand and foot warmers",
    ),
})

DRESSING_ADVICE = MappingProxyType({
    Category.PLEASANT: DressingAdvice(
        layers=("T-shirt or light sweater",),
        accessories=(),
        tips=("You'll be comfortable in light clothing",),
    ),
    Category.CHILLY: DressingAdvice(
        layers=("Long-sleeve shirt", "Light jacket or sweater"),
        accessories=("Optional hat",),
        tips=("Layer up if you'll be outside for a while",),
    ),
    Category.COLD: DressingAdvice(
        layers=("Base layer", "Warm sweater or fleece", "Winter coat"),
        accessories=("Hat", "Gloves"),
        tips=("Keep your head and hands warm",),
    ),
    Category.BRUTAL: DressingAdvice(
        layers=(
            "Base layer (long underwear)",
            "Insulating layer (fleece or wool)",
            "Heavy winter coat",
        ),
        accessories=("Warm hat", "Insulated gloves", "Scarf"),
        tips=(
            "Cover all exposed skin",
            "Wear warm socks and boots",
            "Consider hand warmers",
        ),
    ),
    Category.ARCTIC: DressingAdvice(
        layers=(
            "Thermal base layer",
            "Insulating mid-layer",
            "Heavy insulated coat",
            "Windproof outer layer",
        ),
        accessories=(
            "Insulated hat with ear coverage",
            "Insulated gloves or mittens",
            "Face mask or balaclava",
            "Scarf",
        ),
        tips=(
            "Limit outdoor exposure",
            "Use hand and foot warmers",
            "Watch for signs of frostbite",
            "Stay dry - moisture makes it worse",
        ),
    ),
})


def recommend(category: Category, score: float) -> tuple[str, DressingAdvice]:
    """
    Summary line and dressing advice for a category.

    Args:
        category: Category the score falls in.
        score: Unrounded score, only used to pick the summary line.

    Returns:
        (summary, dressing) tuple.
    """
    return get_summary(category, score), get_dressing_advice(category)


def get_summary(category: Category, score: float) -> str:
    """
    Pick a summary line by floor((score mod 20) / 5).

    The line therefore varies with the score's low-order digits inside a
    band, not with severity. NaN picks the first line.
    """
    summaries = RECOMMENDATIONS[category]
    if math.isnan(score):
        return summaries[0]
    index = math.floor((score % SUMMARY_BAND_WIDTH) / SUMMARY_STEP)
    return summaries[min(index, len(summaries) - 1)]


def get_dressing_advice(category: Category) -> DressingAdvice:
    """Static advice for a category, independent of the exact score."""
    return DRESSING_ADVICE[category]
