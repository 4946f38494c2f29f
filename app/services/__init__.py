"""Services package - service class exports."""

from app.services.lookup import LookupService, build_directory, flatten_postcode_lookup
from app.services.rate_limit import RateLimitGuard, SlidingWindowRateLimiter

__all__ = [
    "LookupService",
    "RateLimitGuard",
    "SlidingWindowRateLimiter",
    "build_directory",
    "flatten_postcode_lookup",
]
