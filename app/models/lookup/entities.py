"""Lookup domain entities - flat join rows and the nested results built from them."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass(frozen=True)
class FlatRow:
    """One row of a postcode/district/MP outer join.

    Every field may be None because of LEFT JOIN semantics: a postcode may have
    no district and a district may have no MP. ``district_id`` is the key
    districts are de-duplicated on; ``district_number`` is only filled for
    directory rows, where ``district_id`` is the surrogate key.
    """

    postcode: int | None = None
    district_id: int | None = None
    district_name: str | None = None
    district_number: int | None = None
    mp_id: int | None = None
    mp_name: str | None = None
    mp_party: str | None = None
    mp_phone: str | None = None


@dataclass
class MpContact(BaseEntity):
    """Representative of a district."""

    name: str
    party: str | None
    phone_number: str | None


@dataclass
class DistrictResult(BaseEntity):
    """District covering a postcode."""

    id: int
    name: str | None
    mp: MpContact | None


@dataclass
class PostcodeLookup(BaseEntity):
    """Districts (and their MPs) covering a single postcode."""

    postcode: int
    districts: list[DistrictResult] = field(default_factory=list)


@dataclass
class DirectoryDistrict(BaseEntity):
    """District held by an MP, with every postcode it covers."""

    id: int
    name: str | None
    number: int | None
    postcodes: list[int] = field(default_factory=list)


@dataclass
class MpResult(BaseEntity):
    """MP directory entry."""

    id: int
    name: str | None
    party: str | None
    phone_number: str | None
    district: DirectoryDistrict | None = None


@dataclass
class DirectorySummary(BaseEntity):
    """Headline counts for the MP directory."""

    total_mps: int
    total_districts: int
    total_postcodes: int
