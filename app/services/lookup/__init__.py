"""Lookup services."""

from app.services.lookup.aggregation import build_directory, flatten_postcode_lookup
from app.services.lookup.service import LookupService

__all__ = [
    "LookupService",
    "build_directory",
    "flatten_postcode_lookup",
]
