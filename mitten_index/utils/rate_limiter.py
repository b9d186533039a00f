"""Pacing for bulk lookups against the Open-Meteo APIs."""

import asyncio
import time


class RateLimiter:
    """
    Spaces out lookups so a bulk run stays inside Open-Meteo's free-tier limits.

    Each `acquire` reserves the next start slot. The first `rate` lookups
    start immediately, after which starts are spaced `per / rate` seconds
    apart. The slot is reserved under the lock and slept off outside it, so
    waiting lookups do not hold each other up.

    Usage:
        limiter = RateLimiter(rate=DEFAULT_RATE_LIMIT)
        await limiter.acquire()  # before geocoding or fetching weather
    """

    def __init__(self, rate: int = 5, per: float = 1.0):
        """
        Args:
            rate: Lookups allowed per period. Also the initial burst.
            per: Period in seconds.
        """
        if rate <= 0 or per <= 0:
            raise ValueError("rate and per must be positive")
        self.rate = rate
        self.per = per
        self.interval = per / rate
        # earliest time the schedule is free again
        self._next_free = time.monotonic()
        self._lock = asyncio.Lock()

    async def acquire(self) -> float:
        """
        Reserve a start slot and wait for it.

        Returns:
            Seconds spent waiting (0 if the slot was free).
        """
        async with self._lock:
            now = time.monotonic()
            self._next_free = max(self._next_free, now) + self.interval
            wait_time = max(0.0, self._next_free - self.rate * self.interval - now)

        if wait_time > 0:
            await asyncio.sleep(wait_time)
        return wait_time

    @property
    def available_tokens(self) -> float:
        """Lookups that could start right now without waiting."""
        backlog = max(self._next_free - time.monotonic(), 0.0)
        return max(self.rate - backlog / self.interval, 0.0)
