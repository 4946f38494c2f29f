"""Tests for the rate limit guard."""

import pytest

from app.models.common import RateLimitExceeded
from app.services.rate_limit import RateLimitGuard, SlidingWindowRateLimiter, epoch_ms


class TestRateLimitGuard:
    def test_admits_until_budget_used(self, guard, clock):
        for _ in range(3):
            guard.admit("ip:1.2.3.4")

        clock.now = 15_500
        with pytest.raises(RateLimitExceeded) as exc:
            guard.admit("ip:1.2.3.4")

        assert exc.value.retry_after_seconds == 45
        assert exc.value.max_requests == 3
        assert exc.value.window_ms == 60_000
        assert "Maximum 3 requests per 1 minutes" in exc.value.message

    def test_window_expiry_readmits(self, guard, clock):
        for _ in range(3):
            guard.admit("key:abc")
        clock.now = 60_000
        guard.admit("key:abc")

    def test_stats(self, guard):
        guard.admit("a")
        guard.admit("b")
        for _ in range(3):
            try:
                guard.admit("a")
            except RateLimitExceeded:
                pass

        stats = guard.stats()
        assert stats.admitted == 4
        assert stats.rejected == 1
        assert stats.tracked_clients == 2

    def test_periodic_sweep(self, clock):
        limiter = SlidingWindowRateLimiter()
        guard = RateLimitGuard(limiter, max_requests=5, window_ms=1000, clock=clock, sweep_every=2)

        guard.admit("old")
        clock.now = 5000
        guard.admit("new")

        assert "old" not in limiter
        assert "new" in limiter

    def test_epoch_ms(self):
        assert epoch_ms() > 1_600_000_000_000
