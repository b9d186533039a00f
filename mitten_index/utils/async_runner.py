"""Async runner for scoring many locations concurrently."""

import asyncio
import logging
from typing import Callable

from ..errors import MittenIndexError
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


async def run_bulk_lookups(
    queries: list[str],
    lookup_func: Callable[[str], dict],
    concurrency: int = 4,
    rate_limit: int = 5,
    on_progress: Callable[[str, dict | None, Exception | None], None] | None = None,
) -> list[dict]:
    """
    Run lookups concurrently with rate limiting.

    A failing lookup yields an error row instead of aborting the batch.

    Args:
        queries: Location queries to score.
        lookup_func: Synchronous function taking a query and returning a
            result dict. Runs in a worker thread.
        concurrency: Maximum number of lookups in flight.
        rate_limit: Maximum lookups started per second.
        on_progress: Optional callback(query, result, error) after each lookup.

    Returns:
        Results in the same order as the input queries.
    """
    rate_limiter = RateLimiter(rate=rate_limit, per=1.0)
    semaphore = asyncio.Semaphore(concurrency)

    async def lookup_with_limits(query: str) -> dict:
        async with semaphore:
            await rate_limiter.acquire()

            try:
                result = await asyncio.to_thread(lookup_func, query)

            except Exception as e:
                if not isinstance(e, MittenIndexError):
                    logger.exception("Unexpected failure looking up %r", query)
                if on_progress:
                    on_progress(query, None, e)
                return error_result(query, e)

            if on_progress:
                on_progress(query, result, None)
            return result

    # gather keeps input order
    return await asyncio.gather(*(lookup_with_limits(q) for q in queries))


def error_result(query: str, error: Exception) -> dict:
    """Result row for a failed lookup. Unexpected errors are not echoed."""
    message = str(error) if isinstance(error, MittenIndexError) else "Internal error"
    return {
        "query": query,
        "error": message,
        "error_type": type(error).__name__,
        "score": None,
        "category": None,
    }
