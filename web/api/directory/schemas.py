"""MP directory API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class DistrictItem(BaseModel):
    """District held by an MP."""

    id: int
    name: str | None
    number: int | None
    postcodes: list[int]


class MpItem(BaseModel):
    """MP directory entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str | None
    party: str | None
    phone_number: str | None = Field(alias="phoneNumber")
    district: DistrictItem | None


class DirectoryResponse(BaseModel):
    """MP directory response."""

    success: bool = True
    data: list[MpItem]


class SummaryData(BaseModel):
    """Directory totals."""

    model_config = ConfigDict(populate_by_name=True)

    total_mps: int = Field(alias="totalMps")
    total_districts: int = Field(alias="totalDistricts")
    total_postcodes: int = Field(alias="totalPostcodes")


class SummaryResponse(BaseModel):
    """Directory summary response."""

    success: bool = True
    data: SummaryData
