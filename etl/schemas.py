"""Dataset schemas - the JSON file the loader reads."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Four digits with leading zeros allowed, so "0800" is stored as 800
def _check_postcode(value: int) -> int:
    if not 0 <= value <= 9999:
        raise ValueError(f"Postcode must be a 4-digit number, got {value}")
    return value


class MpRecord(BaseModel):
    """Member of Parliament."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    party: str
    phone_number: str | None = Field(alias="phoneNumber", default=None)


class DistrictRecord(BaseModel):
    """Electoral district with its representative and postcodes."""

    model_config = ConfigDict(populate_by_name=True)

    district_id: int = Field(alias="districtId")
    name: str
    mp: MpRecord | None = None
    postcodes: list[int] = []

    @field_validator("postcodes")
    @classmethod
    def check_postcodes(cls, values: list[int]) -> list[int]:
        return [_check_postcode(v) for v in values]


class Dataset(BaseModel):
    """Full dataset: districts plus MPs and postcodes not attached to any district."""

    districts: list[DistrictRecord] = []
    unassigned_mps: list[MpRecord] = Field(alias="unassignedMps", default=[])
    unassigned_postcodes: list[int] = Field(alias="unassignedPostcodes", default=[])

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("unassigned_postcodes")
    @classmethod
    def check_postcodes(cls, values: list[int]) -> list[int]:
        return [_check_postcode(v) for v in values]
