"""Aggregation of flat outer-join rows into nested lookup results.

Both builders group with an insertion-ordered dict keyed by id, so output
order is always first-seen order of the input rows.
"""

from collections.abc import Iterable, Sequence

from app.models.common import EmptyResult
from app.models.lookup import (
    DirectoryDistrict,
    DistrictResult,
    FlatRow,
    MpContact,
    MpResult,
    PostcodeLookup,
)


def _mp_contact(row: FlatRow) -> MpContact | None:
    """MP sub-object for a row, None when the district has no representative."""
    if row.mp_name is None:
        return None
    return MpContact(name=row.mp_name, party=row.mp_party, phone_number=row.mp_phone)


def flatten_postcode_lookup(rows: Sequence[FlatRow]) -> PostcodeLookup:
    """Build the districts covering one postcode from its join rows.

    Raises EmptyResult when there are no rows at all. Rows without a district
    are skipped, so an unassigned postcode yields an empty districts list.
    """
    if not rows:
        raise EmptyResult("Postcode not found")

    districts: dict[int, DistrictResult] = {}
    for row in rows:
        if row.district_id is None or row.district_id in districts:
            continue
        districts[row.district_id] = DistrictResult(
            id=row.district_id,
            name=row.district_name,
            mp=_mp_contact(row),
        )

    return PostcodeLookup(postcode=int(rows[0].postcode), districts=list(districts.values()))


def build_directory(rows: Iterable[FlatRow]) -> list[MpResult]:
    """Group directory rows into one entry per MP, in input order."""
    mps: dict[int, MpResult] = {}
    seen: dict[int, set[int]] = {}

    for row in rows:
        if row.mp_id is None:
            continue

        mp = mps.get(row.mp_id)
        if mp is None:
            district = None
            if row.district_id is not None:
                district = DirectoryDistrict(
                    id=row.district_id,
                    name=row.district_name,
                    number=row.district_number,
                )
            mp = MpResult(
                id=row.mp_id,
                name=row.mp_name,
                party=row.mp_party,
                phone_number=row.mp_phone,
                district=district,
            )
            mps[row.mp_id] = mp
            seen[row.mp_id] = set()

        # Postcodes of every district the MP holds land on the attached one
        if mp.district is None or row.postcode is None or row.district_id is None:
            continue

        postcode = int(row.postcode)
        if postcode not in seen[row.mp_id]:
            seen[row.mp_id].add(postcode)
            mp.district.postcodes.append(postcode)

    for mp in mps.values():
        if mp.district is not None:
            mp.district.postcodes.sort()

    return list(mps.values())
