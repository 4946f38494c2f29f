"""Lookup service - postcode lookups and the MP directory."""

from loguru import logger

from app.models.lookup import DirectorySummary, MpResult, PostcodeLookup
from app.repositories.core import MpRepository, PostcodeRepository
from app.services.lookup.aggregation import build_directory, flatten_postcode_lookup


class LookupService:
    """Lookup business logic."""

    def __init__(self, postcode_repo: PostcodeRepository, mp_repo: MpRepository):
        self._postcodes = postcode_repo
        self._mps = mp_repo
        logger.debug("LookupService initialized")

    def lookup(self, postcode: int) -> PostcodeLookup:
        """Districts and MPs for a postcode. Raises EmptyResult for unknown postcodes."""
        rows = self._postcodes.get_lookup_rows(postcode)
        result = flatten_postcode_lookup(rows)
        logger.info("Postcode {}: {} district(s)", postcode, len(result.districts))
        return result

    def directory(self) -> list[MpResult]:
        """All MPs with their district and its postcodes, ordered by name."""
        result = build_directory(self._mps.get_directory_rows())
        logger.debug("Directory: {} MPs", len(result))
        return result

    def summary(self) -> DirectorySummary:
        """Totals over the directory: MPs, MPs holding a district, distinct postcodes."""
        mps = self.directory()
        postcodes = {pc for mp in mps if mp.district for pc in mp.district.postcodes}
        return DirectorySummary(
            total_mps=len(mps),
            total_districts=sum(1 for mp in mps if mp.district),
            total_postcodes=len(postcodes),
        )
