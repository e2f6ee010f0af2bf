"""Minimum-spacing rate limiter."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from smog.domain.shared.port.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class IntervalRateLimiter(RateLimiter):
    """Leaky-bucket gate that spaces call starts at least ``min_interval`` apart.

    Callers are admitted one at a time in arrival order; the first call passes
    immediately, each later one waits until ``min_interval`` seconds after the
    previous admission. Only start times are gated, calls may still overlap
    once admitted.

    One instance is shared by every caller of an upstream, so the spacing holds
    across all concurrent requests.
    """

    def __init__(
        self,
        min_interval: float,
        *,
        name: str = "default",
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if min_interval < 0:
            raise ValueError(f"min_interval must be >= 0, got {min_interval}")
        self._min_interval = min_interval
        self._name = name
        self._clock = clock
        self._sleep = sleep
        self._next_slot: float | None = None
        self._lock = asyncio.Lock()

    @property
    def min_interval(self) -> float:
        return self._min_interval

    async def acquire(self) -> None:
        async with self._lock:
            now = self._clock()
            if self._next_slot is not None and now < self._next_slot:
                delay = self._next_slot - now
                logger.debug("Rate limiter %s: waiting %.3fs", self._name, delay)
                await self._sleep(delay)
                now = self._clock()
            self._next_slot = now + self._min_interval
