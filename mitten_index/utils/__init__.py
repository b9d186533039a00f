"""Utility modules for the Mitten Index."""

from .rate_limiter import RateLimiter
from .async_runner import run_bulk_lookups, error_result
from .logging import configure_logging

__all__ = ["RateLimiter", "run_bulk_lookups", "error_result", "configure_logging"]
