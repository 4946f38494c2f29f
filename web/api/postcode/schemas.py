"""Postcode lookup API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PostcodeLookupRequest(BaseModel):
    """POST body; the postcode may arrive as a string or a number."""

    postcode: str | int | None = None


class MpItem(BaseModel):
    """District representative."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    party: str | None
    phone_number: str | None = Field(alias="phoneNumber")


class DistrictItem(BaseModel):
    """District covering the postcode."""

    name: str | None
    id: int
    mp: MpItem | None


class PostcodeLookupData(BaseModel):
    """Lookup result."""

    postcode: int
    districts: list[DistrictItem]


class PostcodeLookupResponse(BaseModel):
    """Postcode lookup response."""

    success: bool = True
    data: PostcodeLookupData
