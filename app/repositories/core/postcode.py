"""Postcode repository - postcode lookups across districts and MPs."""

from loguru import logger

from app.models.lookup import FlatRow
from app.repositories.base import BaseRepository


class PostcodeRepository(BaseRepository):
    """Repository for postcode lookups."""

    def get_lookup_rows(self, postcode: int) -> list[FlatRow]:
        """Get one row per (postcode, district) pair; district and MP columns may be NULL."""
        rows = self.fetchall(
            """
            SELECT p.postcode_number, d.district_id, d.name,
                   m.name, m.party, m.phone_number
            FROM postcode p
            LEFT JOIN postcode_district pd ON pd.postcode_id = p.id
            LEFT JOIN district d ON pd.district_id = d.id
            LEFT JOIN mp m ON d.mp_id = m.id
            WHERE p.postcode_number = ?
            ORDER BY d.district_id NULLS LAST
            """,
            [postcode],
        )
        result = [
            FlatRow(
                postcode=r[0],
                district_id=r[1],
                district_name=r[2],
                mp_name=r[3],
                mp_party=r[4],
                mp_phone=r[5],
            )
            for r in rows
        ]
        logger.debug("get_lookup_rows({}): {} rows", postcode, len(result))
        return result
