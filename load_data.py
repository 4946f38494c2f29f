#!/usr/bin/env python3
"""
Load postcode/district/MP data into the database.

Usage:
    python load_data.py data/districts.json              # Replace all data with the file
    python load_data.py data/districts.json --validate   # Load, then check data integrity
    python load_data.py --validate                       # Check data integrity only
"""

import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb
from pydantic import ValidationError

from app.repositories import get_write_connection
from etl import Dataset, load_dataset, validate_dataset
from settings import DB_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def run_validation() -> bool:
    """Print a validation report for the database."""
    if not Path(DB_PATH).exists():
        print("\n⚠️  No database found. Run 'python load_data.py <file>' first.\n")
        return True

    conn = duckdb.connect(DB_PATH, read_only=True)
    result = validate_dataset(conn)
    conn.close()

    stats = result["stats"]
    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    print(f"  MPs: {stats['mp']:,}")
    print(f"  Districts: {stats['district']:,}")
    print(f"  Postcodes: {stats['postcode']:,}")
    print(f"  Postcode/district links: {stats['postcode_district']:,}")
    for warning in result["warnings"]:
        print(f"  ℹ️  {warning}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ All data valid!")
    else:
        print("❌ Some issues found. Fix the dataset and load again.")
    print("=" * 60 + "\n")

    return result["valid"]


def load_file(path: Path) -> None:
    """Parse, validate and load a dataset file."""
    try:
        dataset = Dataset.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Cannot read dataset {}: {}", path, e)
        sys.exit(1)

    conn = get_write_connection()
    try:
        load_dataset(conn, dataset)
    finally:
        conn.close()


def main():
    args = sys.argv[1:]
    validate = "--validate" in args
    files = [a for a in args if a != "--validate"]

    if not files and not validate:
        print(__doc__)
        sys.exit(1)

    for name in files:
        logger.info("Loading {}", name)
        load_file(Path(name))

    if validate:
        ok = run_validation()
        sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
