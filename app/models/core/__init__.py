"""Core domain models - MPs, districts and postcodes."""

from app.models.core.district import DISTRICT_DDL, DISTRICT_INDEXES
from app.models.core.mp import MP_DDL, MP_INDEXES
from app.models.core.postcode import POSTCODE_DDL, POSTCODE_DISTRICT_DDL, POSTCODE_INDEXES

__all__ = [
    "MP_DDL",
    "DISTRICT_DDL",
    "POSTCODE_DDL",
    "POSTCODE_DISTRICT_DDL",
    "MP_INDEXES",
    "DISTRICT_INDEXES",
    "POSTCODE_INDEXES",
]
