"""Lookup domain models - postcode lookups and the MP directory."""

from app.models.lookup.entities import (
    DirectoryDistrict,
    DirectorySummary,
    DistrictResult,
    FlatRow,
    MpContact,
    MpResult,
    PostcodeLookup,
)

__all__ = [
    "FlatRow",
    "MpContact",
    "DistrictResult",
    "PostcodeLookup",
    "DirectoryDistrict",
    "MpResult",
    "DirectorySummary",
]
