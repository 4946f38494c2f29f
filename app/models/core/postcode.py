"""Postcode model and the postcode <-> district junction table."""

POSTCODE_DDL = """
CREATE TABLE IF NOT EXISTS postcode (
    id INTEGER PRIMARY KEY,
    postcode_number INTEGER NOT NULL UNIQUE,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    updated_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

# Many-to-many: a postcode can straddle several districts
POSTCODE_DISTRICT_DDL = """
CREATE TABLE IF NOT EXISTS postcode_district (
    postcode_id INTEGER NOT NULL,
    district_id INTEGER NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    PRIMARY KEY (postcode_id, district_id)
)
"""

POSTCODE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_postcode_district_district ON postcode_district(district_id)",
]
