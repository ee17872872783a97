"""
Client-side rate limiting for Scryfall requests.

Scryfall asks clients to stay at or below 10 requests per second. The
limiter spaces admissions at least `per / rate` seconds apart, so no more
than `rate` calls begin within any rolling `per`-second window.

INVARIANTS:
- One admission is consumed before every outbound request
- Each client owns its limiter; nothing is shared across clients
- Waiting for admission is cancellable (asyncio.CancelledError propagates)
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from threading import Lock

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Thread-safe spacing rate limiter for async callers.

    Slots are reserved under a lock and waited for outside it, so many
    tasks (or threads running their own event loops) can share one limiter.
    """

    def __init__(
        self,
        rate: float = 10,
        per: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Create a limiter.

        Args:
            rate: Admissions allowed per window
            per: Window length in seconds
            clock: Monotonic clock (injectable for tests)
            sleep: Async sleep function (injectable for tests)

        Raises:
            ValueError: If rate or per is not positive
        """
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        if per <= 0:
            raise ValueError(f"per must be positive, got {per}")

        self.rate = rate
        self.per = per
        self._clock = clock
        self._sleep = sleep
        self._next_slot: float | None = None
        self._lock = Lock()

    @property
    def interval(self) -> float:
        """Minimum spacing between two admissions, in seconds."""
        return self.per / self.rate

    def _reserve(self) -> float:
        """Reserve the next free slot and return how long to wait for it."""
        with self._lock:
            now = self._clock()
            if self._next_slot is None or self._next_slot <= now:
                slot = now
            else:
                slot = self._next_slot
            self._next_slot = slot + self.interval
            return slot - now

    async def acquire(self) -> None:
        """
        Wait until a request may start.

        Cancelling the awaiting task aborts the wait. The reserved slot is
        not handed back, which only makes the limiter more conservative.
        """
        delay = self._reserve()
        if delay > 0:
            logger.debug("Rate limiter waiting %.3fs", delay)
            await self._sleep(delay)
