"""Dependency Injection container - initialized at app startup."""

from app.repositories.core import MpRepository, PostcodeRepository
from app.services.lookup import LookupService
from app.services.rate_limit import RateLimitGuard, SlidingWindowRateLimiter
from settings import (
    RATE_LIMIT_MAX_CLIENTS,
    RATE_LIMIT_MAX_REQUESTS,
    RATE_LIMIT_SWEEP_EVERY,
    RATE_LIMIT_WINDOW_MS,
)


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self._postcode_repo = PostcodeRepository()
        self._mp_repo = MpRepository()

        # Services (with injected repos)
        self.lookup = LookupService(
            postcode_repo=self._postcode_repo,
            mp_repo=self._mp_repo,
        )

        # Rate limiting (process-wide state)
        self.rate_limiter = SlidingWindowRateLimiter(max_clients=RATE_LIMIT_MAX_CLIENTS)
        self.rate_limit = RateLimitGuard(
            limiter=self.rate_limiter,
            max_requests=RATE_LIMIT_MAX_REQUESTS,
            window_ms=RATE_LIMIT_WINDOW_MS,
            sweep_every=RATE_LIMIT_SWEEP_EVERY,
        )

        self._initialized = True

    def override(self, lookup: LookupService, rate_limit: RateLimitGuard) -> None:
        """Install pre-built services instead of the defaults (tests, embedding)."""
        self.lookup = lookup
        self.rate_limit = rate_limit
        self._initialized = True

    def reset(self) -> None:
        """Forget all instances; the next init() rebuilds them."""
        for attr in ("lookup", "rate_limit", "rate_limiter", "_postcode_repo", "_mp_repo"):
            self.__dict__.pop(attr, None)
        self._initialized = False


# Global container instance
container = Container()
