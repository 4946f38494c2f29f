"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity, EmptyResult, RateLimitExceeded
from app.models.core import (
    DISTRICT_DDL,
    DISTRICT_INDEXES,
    MP_DDL,
    MP_INDEXES,
    POSTCODE_DDL,
    POSTCODE_DISTRICT_DDL,
    POSTCODE_INDEXES,
)
from app.models.lookup import (
    DirectoryDistrict,
    DirectorySummary,
    DistrictResult,
    FlatRow,
    MpContact,
    MpResult,
    PostcodeLookup,
)
from app.models.rate_limit import RateLimitDecision, RateLimitStats

ALL_DDL = [
    MP_DDL,
    DISTRICT_DDL,
    POSTCODE_DDL,
    POSTCODE_DISTRICT_DDL,
]

ALL_INDEXES = [
    *MP_INDEXES,
    *DISTRICT_INDEXES,
    *POSTCODE_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    "EmptyResult",
    "RateLimitExceeded",
    # Core
    "MP_DDL",
    "DISTRICT_DDL",
    "POSTCODE_DDL",
    "POSTCODE_DISTRICT_DDL",
    # Lookup
    "FlatRow",
    "MpContact",
    "DistrictResult",
    "PostcodeLookup",
    "DirectoryDistrict",
    "MpResult",
    "DirectorySummary",
    # Rate limiting
    "RateLimitDecision",
    "RateLimitStats",
    # All DDL
    "ALL_DDL",
    "ALL_INDEXES",
]
