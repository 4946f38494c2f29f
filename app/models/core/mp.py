"""MP (Member of Parliament) model."""

MP_DDL = """
CREATE TABLE IF NOT EXISTS mp (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    party VARCHAR NOT NULL,
    phone_number VARCHAR,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    updated_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

MP_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_mp_name ON mp(name)",
]
