"""Data validation functions."""

import duckdb

from helpers import formulas


def _count(conn: duckdb.DuckDBPyConnection, query: str) -> int:
    return conn.execute(query).fetchone()[0] or 0


def validate_dataset(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate integrity of the loaded deaths and vaccinations tables."""
    issues = []
    stats = {}

    stats["deaths_rows"] = _count(conn, "SELECT COUNT(*) FROM deaths")
    stats["vaccinations_rows"] = _count(conn, "SELECT COUNT(*) FROM vaccinations")
    if stats["deaths_rows"] == 0:
        issues.append("No deaths rows loaded")
    if stats["vaccinations_rows"] == 0:
        issues.append("No vaccination rows loaded")

    stats["locations"] = _count(conn, "SELECT COUNT(DISTINCT location) FROM deaths WHERE continent IS NOT NULL")
    stats["aggregate_rows"] = _count(conn, "SELECT COUNT(*) FROM deaths WHERE continent IS NULL")

    for table in ("deaths", "vaccinations"):
        duplicates = _count(
            conn,
            f"""
            SELECT COUNT(*) FROM (
                SELECT location, date FROM {table}
                GROUP BY location, date
                HAVING COUNT(*) > 1
            )
            """,
        )
        stats[f"{table}_duplicate_keys"] = duplicates
        if duplicates > 0:
            issues.append(f"{duplicates} duplicate (location, date) keys in {table}")

    cases_below_new = _count(conn, "SELECT COUNT(*) FROM deaths WHERE total_cases < new_cases")
    if cases_below_new > 0:
        issues.append(f"{cases_below_new} rows have total_cases < new_cases")

    negative = _count(conn, "SELECT COUNT(*) FROM deaths WHERE new_cases < 0 OR new_deaths < 0")
    if negative > 0:
        issues.append(f"{negative} rows have negative new_cases or new_deaths")

    # Unmatched keys are legal (inner join drops them), report only
    matched = _count(
        conn,
        """
        SELECT COUNT(*) FROM deaths d
        JOIN vaccinations v ON d.location = v.location AND d.date = v.date
        """,
    )
    stats["deaths_without_vaccinations"] = stats["deaths_rows"] - matched
    stats["vaccinations_without_deaths"] = _count(
        conn,
        """
        SELECT COUNT(*) FROM vaccinations v
        WHERE NOT EXISTS (
            SELECT 1 FROM deaths d WHERE d.location = v.location AND d.date = v.date
        )
        """,
    )
    stats["coverage_pct"] = formulas.round_or_none(formulas.percentage(matched, stats["deaths_rows"]), 1) or 0

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
