"""Common models - shared across all domains."""

from app.models.common.base import BaseEntity
from app.models.common.errors import EmptyResult, RateLimitExceeded

__all__ = [
    "BaseEntity",
    "EmptyResult",
    "RateLimitExceeded",
]
