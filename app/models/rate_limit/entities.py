"""Rate limiting entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class RateLimitDecision(BaseEntity):
    """Outcome of a single admission check."""

    admitted: bool
    retry_after_seconds: int | None = None


@dataclass
class RateLimitStats(BaseEntity):
    """Admission counters kept by the guard."""

    admitted: int = 0
    rejected: int = 0
    tracked_clients: int = 0
