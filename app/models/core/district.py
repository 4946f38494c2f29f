"""Electoral district model.

``id`` is the surrogate key used by joins, ``district_id`` is the public
district number exposed through the API.
"""

DISTRICT_DDL = """
CREATE TABLE IF NOT EXISTS district (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    district_id INTEGER NOT NULL UNIQUE,
    mp_id INTEGER,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    updated_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

DISTRICT_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_district_mp ON district(mp_id)",
]
