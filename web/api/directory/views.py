"""Directory API views - thin layer over services."""

from app.container import container

from .schemas import DirectoryResponse, DistrictItem, MpItem, SummaryData, SummaryResponse


def get_directory() -> DirectoryResponse:
    """Get all MPs with their district and postcodes."""
    data = container.lookup.directory()

    items = [
        MpItem(
            id=mp.id,
            name=mp.name,
            party=mp.party,
            phone_number=mp.phone_number,
            district=DistrictItem(**mp.district.to_dict()) if mp.district else None,
        )
        for mp in data
    ]

    return DirectoryResponse(data=items)


def get_directory_summary() -> SummaryResponse:
    """Get directory totals."""
    data = container.lookup.summary()
    return SummaryResponse(data=SummaryData(**data.to_dict()))
