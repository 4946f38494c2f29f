"""Rate limiting services."""

from app.services.rate_limit.guard import RateLimitGuard, epoch_ms
from app.services.rate_limit.limiter import SlidingWindowRateLimiter

__all__ = [
    "SlidingWindowRateLimiter",
    "RateLimitGuard",
    "epoch_ms",
]
