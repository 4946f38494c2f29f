"""Data validation functions."""

import duckdb


def validate_dataset(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate the loaded data.

    Broken links and missing postcodes are issues; unassigned postcodes,
    vacant districts and MPs without a district are legitimate but reported
    as warnings. Districts without postcodes are issues.
    """
    issues = []
    warnings = []
    stats = {}

    for table in ("mp", "district", "postcode", "postcode_district"):
        stats[table] = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    if stats["postcode"] == 0:
        issues.append("No postcodes found")

    orphan_postcodes = conn.execute(
        """
        SELECT COUNT(*) FROM postcode p
        LEFT JOIN postcode_district pd ON pd.postcode_id = p.id
        WHERE pd.postcode_id IS NULL
        """
    ).fetchone()[0]
    stats["postcodes_without_district"] = orphan_postcodes
    if orphan_postcodes > 0:
        warnings.append(f"{orphan_postcodes} postcodes have no district")

    vacant = conn.execute(
        """
        SELECT COUNT(*) FROM district d
        LEFT JOIN mp m ON d.mp_id = m.id
        WHERE m.id IS NULL
        """
    ).fetchone()[0]
    stats["districts_without_mp"] = vacant
    if vacant > 0:
        warnings.append(f"{vacant} districts have no MP")

    empty_districts = conn.execute(
        """
        SELECT COUNT(*) FROM district d
        LEFT JOIN postcode_district pd ON pd.district_id = d.id
        WHERE pd.district_id IS NULL
        """
    ).fetchone()[0]
    stats["districts_without_postcodes"] = empty_districts
    if empty_districts > 0:
        issues.append(f"{empty_districts} districts have no postcodes")

    unseated = conn.execute(
        """
        SELECT COUNT(*) FROM mp m
        LEFT JOIN district d ON d.mp_id = m.id
        WHERE d.id IS NULL
        """
    ).fetchone()[0]
    stats["mps_without_district"] = unseated
    if unseated > 0:
        warnings.append(f"{unseated} MPs hold no district")

    dangling = conn.execute(
        """
        SELECT COUNT(*) FROM postcode_district pd
        LEFT JOIN postcode p ON pd.postcode_id = p.id
        LEFT JOIN district d ON pd.district_id = d.id
        WHERE p.id IS NULL OR d.id IS NULL
        """
    ).fetchone()[0]
    stats["dangling_links"] = dangling
    if dangling > 0:
        issues.append(f"{dangling} postcode/district links point to missing rows")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
        "warnings": warnings,
    }
