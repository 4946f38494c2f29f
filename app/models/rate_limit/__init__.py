"""Rate limiting models."""

from app.models.rate_limit.entities import RateLimitDecision, RateLimitStats

__all__ = [
    "RateLimitDecision",
    "RateLimitStats",
]
