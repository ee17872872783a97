"""
Tests for the client-side rate limiter.

INVARIANTS:
- At N admissions per window, never more than N admissions start in any
  rolling window
- Waiting for admission can be cancelled
- One limiter can be shared by concurrent tasks
"""

import asyncio

import pytest

from scryfall_client.rate_limit import RateLimiter


class FakeClock:
    """Manual clock whose sleep advances time instead of waiting."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, delay: float) -> None:
        self.sleeps.append(delay)
        self.now += delay


def make_limiter(rate: float = 10, per: float = 1.0) -> tuple[RateLimiter, FakeClock]:
    clock = FakeClock()
    return RateLimiter(rate=rate, per=per, clock=clock, sleep=clock.sleep), clock


class TestRateLimiterConfig:
    def test_interval(self) -> None:
        limiter = RateLimiter(rate=10)
        assert limiter.interval == pytest.approx(0.1)

    def test_custom_window(self) -> None:
        limiter = RateLimiter(rate=5, per=2.0)
        assert limiter.interval == pytest.approx(0.4)

    @pytest.mark.parametrize("rate", [0, -1])
    def test_rejects_non_positive_rate(self, rate: float) -> None:
        with pytest.raises(ValueError, match="rate must be positive"):
            RateLimiter(rate=rate)

    def test_rejects_non_positive_window(self) -> None:
        with pytest.raises(ValueError, match="per must be positive"):
            RateLimiter(rate=10, per=0)


class TestAcquire:
    """Tests for admission spacing."""

    async def test_first_admission_is_immediate(self) -> None:
        """A fresh limiter admits without waiting."""
        limiter, clock = make_limiter()

        await limiter.acquire()

        assert clock.sleeps == []

    async def test_back_to_back_admissions_are_spaced(self) -> None:
        """Consecutive admissions wait one interval each."""
        limiter, clock = make_limiter(rate=10)

        for _ in range(4):
            await limiter.acquire()

        assert clock.sleeps == [pytest.approx(0.1)] * 3
        assert clock.now == pytest.approx(0.3)

    async def test_idle_time_is_not_banked(self) -> None:
        """After a long pause the next admission is immediate, not a burst."""
        limiter, clock = make_limiter(rate=10)

        await limiter.acquire()
        clock.now += 5.0
        await limiter.acquire()
        await limiter.acquire()

        assert clock.sleeps == [pytest.approx(0.1)]

    async def test_partial_wait(self) -> None:
        """Only the remainder of the interval is waited."""
        limiter, clock = make_limiter(rate=10)

        await limiter.acquire()
        clock.now += 0.06
        await limiter.acquire()

        assert clock.sleeps == [pytest.approx(0.04)]

    @pytest.mark.parametrize("rate", [1, 3, 10])
    async def test_rolling_window_never_exceeds_rate(self, rate: int) -> None:
        """No one-second window contains more than `rate` admission starts."""
        limiter, clock = make_limiter(rate=rate)
        starts: list[float] = []

        for _ in range(rate * 4):
            await limiter.acquire()
            starts.append(clock.now)

        for start in starts:
            in_window = [t for t in starts if start <= t < start + 1.0 - 1e-9]
            assert len(in_window) <= rate

    async def test_concurrent_tasks_share_slots(self) -> None:
        """Tasks reserving together each get a distinct slot."""
        delays: list[float] = []

        async def record(delay: float) -> None:
            delays.append(delay)

        limiter = RateLimiter(rate=10, clock=lambda: 0.0, sleep=record)

        await asyncio.gather(*(limiter.acquire() for _ in range(5)))

        assert sorted(delays) == [
            pytest.approx(0.1),
            pytest.approx(0.2),
            pytest.approx(0.3),
            pytest.approx(0.4),
        ]


class TestCancellation:
    async def test_wait_can_be_cancelled(self) -> None:
        """A deadline interrupts a long admission wait."""
        limiter = RateLimiter(rate=1, per=60.0)
        await limiter.acquire()

        with pytest.raises(TimeoutError):
            async with asyncio.timeout(0.05):
                await limiter.acquire()

    async def test_cancelled_task_raises_cancelled_error(self) -> None:
        limiter = RateLimiter(rate=1, per=60.0)
        await limiter.acquire()

        task = asyncio.create_task(limiter.acquire())
        await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
