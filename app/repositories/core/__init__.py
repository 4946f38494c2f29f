"""Core repositories - MPs, districts and postcodes."""

from app.repositories.core.mp import MpRepository
from app.repositories.core.postcode import PostcodeRepository

__all__ = [
    "MpRepository",
    "PostcodeRepository",
]
