"""Rate limit guard - binds the limiter to configured limits and a clock."""

import threading
import time
from collections.abc import Callable

from loguru import logger

from app.models.common import RateLimitExceeded
from app.models.rate_limit import RateLimitStats
from app.services.rate_limit.limiter import SlidingWindowRateLimiter


def epoch_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class RateLimitGuard:
    """Admission control for API requests.

    Translates limiter rejections into RateLimitExceeded, keeps admission
    counters and periodically sweeps identifiers with fully expired logs.
    """

    def __init__(
        self,
        limiter: SlidingWindowRateLimiter,
        max_requests: int,
        window_ms: int,
        clock: Callable[[], int] = epoch_ms,
        sweep_every: int = 1000,
    ):
        self._limiter = limiter
        self.max_requests = max_requests
        self.window_ms = window_ms
        self._clock = clock
        self._sweep_every = sweep_every
        self._stats_lock = threading.Lock()
        self._admitted = 0
        self._rejected = 0
        logger.info("RateLimitGuard: {} requests per {} ms", max_requests, window_ms)

    def admit(self, client_id: str) -> None:
        """Record a request from ``client_id`` or raise RateLimitExceeded."""
        now = self._clock()
        decision = self._limiter.check(client_id, now, self.max_requests, self.window_ms)

        with self._stats_lock:
            if decision.admitted:
                self._admitted += 1
            else:
                self._rejected += 1
            checks = self._admitted + self._rejected

        if self._sweep_every and checks % self._sweep_every == 0:
            removed = self._limiter.sweep(now, self.window_ms)
            if removed:
                logger.debug("Rate limiter sweep removed {} idle clients", removed)

        if not decision.admitted:
            logger.warning("Rate limit exceeded for {} (retry in {}s)", _mask(client_id), decision.retry_after_seconds)
            raise RateLimitExceeded(decision.retry_after_seconds, self.max_requests, self.window_ms)

    def stats(self) -> RateLimitStats:
        """Admission counters since startup."""
        with self._stats_lock:
            return RateLimitStats(
                admitted=self._admitted,
                rejected=self._rejected,
                tracked_clients=len(self._limiter),
            )


def _mask(client_id: str) -> str:
    """Shorten identifiers (which may be API keys) before logging them."""
    return client_id if len(client_id) <= 8 else f"{client_id[:8]}..."
