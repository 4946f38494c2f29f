"""Postcode API views - thin layer over services."""

from loguru import logger

from app.container import container
from app.models.common import EmptyResult
from web.api.errors import NotFoundError, validate_postcode

from .schemas import DistrictItem, MpItem, PostcodeLookupData, PostcodeLookupResponse


def lookup_postcode(postcode: str | int | None) -> PostcodeLookupResponse:
    """Look up districts and MPs for a raw (unvalidated) postcode."""
    number = validate_postcode(postcode)

    try:
        data = container.lookup.lookup(number)
    except EmptyResult as e:
        logger.info("Postcode {} not found", number)
        raise NotFoundError("Postcode not found") from e

    districts = [
        DistrictItem(
            name=d.name,
            id=d.id,
            mp=MpItem(name=d.mp.name, party=d.mp.party, phone_number=d.mp.phone_number) if d.mp else None,
        )
        for d in data.districts
    ]

    return PostcodeLookupResponse(data=PostcodeLookupData(postcode=data.postcode, districts=districts))
