"""Load a dataset into the database, replacing what is there."""

import duckdb
import polars as pl
from loguru import logger

from app.repositories.db import init_tables
from etl.schemas import Dataset, MpRecord

TABLES = ["postcode_district", "district", "postcode", "mp"]


def _mp_key(mp: MpRecord) -> tuple[str, str]:
    return (mp.name, mp.party)


def build_frames(dataset: Dataset) -> dict[str, pl.DataFrame]:
    """Assign surrogate ids and build one DataFrame per table."""
    mp_ids: dict[tuple[str, str], int] = {}
    mp_rows = []

    def mp_id(mp: MpRecord) -> int:
        key = _mp_key(mp)
        if key not in mp_ids:
            mp_ids[key] = len(mp_ids) + 1
            mp_rows.append({"id": mp_ids[key], "name": mp.name, "party": mp.party, "phone_number": mp.phone_number})
        return mp_ids[key]

    numbers = sorted(
        {pc for d in dataset.districts for pc in d.postcodes} | set(dataset.unassigned_postcodes)
    )
    postcode_ids = {pc: i for i, pc in enumerate(numbers, start=1)}

    district_rows = []
    link_rows = []
    for i, d in enumerate(dataset.districts, start=1):
        district_rows.append(
            {"id": i, "name": d.name, "district_id": d.district_id, "mp_id": mp_id(d.mp) if d.mp else None}
        )
        for pc in dict.fromkeys(d.postcodes):
            link_rows.append({"postcode_id": postcode_ids[pc], "district_id": i})

    for mp in dataset.unassigned_mps:
        mp_id(mp)

    return {
        "mp": pl.DataFrame(
            mp_rows,
            schema={"id": pl.Int32, "name": pl.Utf8, "party": pl.Utf8, "phone_number": pl.Utf8},
        ),
        "district": pl.DataFrame(
            district_rows,
            schema={"id": pl.Int32, "name": pl.Utf8, "district_id": pl.Int32, "mp_id": pl.Int32},
        ),
        "postcode": pl.DataFrame(
            [{"id": pid, "postcode_number": pc} for pc, pid in postcode_ids.items()],
            schema={"id": pl.Int32, "postcode_number": pl.Int32},
        ),
        "postcode_district": pl.DataFrame(
            link_rows,
            schema={"postcode_id": pl.Int32, "district_id": pl.Int32},
        ),
    }


def load_dataset(conn: duckdb.DuckDBPyConnection, dataset: Dataset) -> dict[str, int]:
    """Replace all lookup tables with the dataset. Returns row counts per table."""
    frames = build_frames(dataset)

    district_numbers = frames["district"]["district_id"]
    if district_numbers.n_unique() != len(district_numbers):
        raise ValueError("Duplicate district numbers in dataset")

    conn.execute("BEGIN TRANSACTION")
    try:
        # DuckDB rejects re-inserting keys deleted earlier in the same transaction
        for table in TABLES:
            conn.execute(f"DROP TABLE IF EXISTS {table}")
        init_tables(conn)
        for table in reversed(TABLES):
            df = frames[table]
            columns = ", ".join(df.columns)
            conn.register(f"{table}_df", df)
            conn.execute(f"INSERT INTO {table} ({columns}) SELECT {columns} FROM {table}_df")
            conn.unregister(f"{table}_df")
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise

    counts = {table: frames[table].height for table in TABLES}
    logger.info(
        "Loaded {} MPs, {} districts, {} postcodes, {} links",
        counts["mp"],
        counts["district"],
        counts["postcode"],
        counts["postcode_district"],
    )
    return counts
