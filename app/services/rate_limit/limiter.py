"""Sliding-window in-memory rate limiter.

Each client identifier owns a log of admission timestamps (epoch ms) guarded
by its own lock. The registry lock only protects the identifier map, so
checks for unrelated clients never wait on each other's logs.

Lock order is always registry -> log, and the registry side only ever
try-acquires a log lock, so a check holding its log lock cannot deadlock
against a sweep or an eviction.
"""

import threading
from collections import OrderedDict, deque

from app.models.rate_limit import RateLimitDecision

DEFAULT_MAX_CLIENTS = 10_000


class _ClientLog:
    """Timestamps admitted for one identifier inside the trailing window."""

    __slots__ = ("lock", "timestamps", "detached")

    def __init__(self):
        self.lock = threading.Lock()
        self.timestamps: deque[int] = deque()
        # Set (under self.lock) once the log is removed from the registry
        self.detached = False

    def prune(self, now: int, window_ms: int) -> None:
        boundary = now - window_ms
        while self.timestamps and self.timestamps[0] <= boundary:
            self.timestamps.popleft()

    def expired(self, now: int, window_ms: int) -> bool:
        return not self.timestamps or self.timestamps[-1] <= now - window_ms


class SlidingWindowRateLimiter:
    """Per-identifier sliding-window limiter with a bounded identifier map."""

    def __init__(self, max_clients: int = DEFAULT_MAX_CLIENTS):
        if max_clients < 1:
            raise ValueError("max_clients must be positive")
        self._max_clients = max_clients
        self._logs: OrderedDict[str, _ClientLog] = OrderedDict()
        self._registry_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._logs)

    def __contains__(self, client_id: str) -> bool:
        return client_id in self._logs

    def _detach(self, client_id: str, log: _ClientLog) -> bool:
        """Remove a log from the registry if no check is using it. Registry lock must be held."""
        if not log.lock.acquire(blocking=False):
            return False
        try:
            log.detached = True
            del self._logs[client_id]
        finally:
            log.lock.release()
        return True

    def _evict_overflow(self) -> None:
        """Evict least recently used identifiers beyond max_clients. Registry lock must be held."""
        overflow = len(self._logs) - self._max_clients
        if overflow <= 0:
            return
        # The most recent entry is the one being inserted
        for client_id, log in list(self._logs.items())[:-1]:
            if overflow <= 0:
                break
            if self._detach(client_id, log):
                overflow -= 1

    def _log_for(self, client_id: str) -> _ClientLog:
        """Get or lazily create the log, marking it most recently used."""
        with self._registry_lock:
            log = self._logs.get(client_id)
            if log is None:
                log = _ClientLog()
                self._logs[client_id] = log
                self._evict_overflow()
            else:
                self._logs.move_to_end(client_id)
            return log

    def check(self, client_id: str, now: int, max_requests: int, window_ms: int) -> RateLimitDecision:
        """Admit or reject one request from ``client_id`` at ``now`` (epoch ms).

        Timestamps exactly ``window_ms`` old are already outside the window.
        A rejection does not consume budget.
        """
        while True:
            log = self._log_for(client_id)
            with log.lock:
                if log.detached:
                    # Swept or evicted between lookup and lock; use the fresh log
                    continue

                log.prune(now, window_ms)

                if len(log.timestamps) >= max_requests:
                    if not log.timestamps:
                        # max_requests <= 0 admits nothing and has nothing to wait for
                        return RateLimitDecision(admitted=False, retry_after_seconds=0)
                    remaining_ms = log.timestamps[0] + window_ms - now
                    return RateLimitDecision(admitted=False, retry_after_seconds=max(0, -(-remaining_ms // 1000)))

                log.timestamps.append(now)
                return RateLimitDecision(admitted=True)

    def sweep(self, now: int, window_ms: int) -> int:
        """Drop identifiers whose whole log has expired. Returns how many were removed."""
        removed = 0
        with self._registry_lock:
            for client_id, log in list(self._logs.items()):
                if not log.lock.acquire(blocking=False):
                    continue
                try:
                    if log.expired(now, window_ms):
                        log.detached = True
                        del self._logs[client_id]
                        removed += 1
                finally:
                    log.lock.release()
        return removed

    def reset(self, client_id: str | None = None) -> None:
        """Forget one identifier, or every identifier when none is given."""
        with self._registry_lock:
            targets = list(self._logs.items()) if client_id is None else [(client_id, self._logs.get(client_id))]
            for key, log in targets:
                if log is None:
                    continue
                with log.lock:
                    log.detached = True
                    del self._logs[key]
