"""Scoring and calculation modules."""

from .calculator import aggregate, calculate_mitten_index, categorize, round_score
from .factors import compute_factors
from .recommendations import get_dressing_advice, get_summary, recommend

__all__ = [
    "aggregate",
    "calculate_mitten_index",
    "categorize",
    "compute_factors",
    "get_dressing_advice",
    "get_summary",
    "recommend",
    "round_score",
]
