"""MP repository - access to MPs, their districts and postcodes."""

from loguru import logger

from app.models.lookup import FlatRow
from app.repositories.base import BaseRepository


class MpRepository(BaseRepository):
    """Repository for the MP directory."""

    def get_directory_rows(self) -> list[FlatRow]:
        """Get MP/district/postcode rows ordered by MP name."""

        def fetch():
            rows = self.fetchall(
                """
                SELECT m.id, m.name, m.party, m.phone_number,
                       d.id, d.name, d.district_id, p.postcode_number
                FROM mp m
                LEFT JOIN district d ON d.mp_id = m.id
                LEFT JOIN postcode_district pd ON pd.district_id = d.id
                LEFT JOIN postcode p ON pd.postcode_id = p.id
                ORDER BY m.name, m.id, d.id, p.postcode_number
                """
            )
            result = [
                FlatRow(
                    mp_id=r[0],
                    mp_name=r[1],
                    mp_party=r[2],
                    mp_phone=r[3],
                    district_id=r[4],
                    district_name=r[5],
                    district_number=r[6],
                    postcode=r[7],
                )
                for r in rows
            ]
            logger.debug("get_directory_rows(): {} rows", len(result))
            return result

        return self._cached("directory_rows", fetch)
