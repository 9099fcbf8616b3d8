"""Main load orchestration."""

from pathlib import Path

import duckdb
import polars as pl
from loguru import logger

from app.models.covid import DEATHS_COLUMNS, VACCINATIONS_COLUMNS
from app.repositories.db import get_write_connection, init_views
from etl.loader import load_deaths_csv, load_vaccinations_csv
from etl.validation import validate_dataset


def replace_table(conn: duckdb.DuckDBPyConnection, table: str, df: pl.DataFrame, columns: list[str]) -> None:
    """Replace table contents with df in one transaction."""
    view = f"{table}_df"
    cols = ", ".join(columns)
    conn.execute("BEGIN TRANSACTION")
    try:
        conn.execute(f"DELETE FROM {table}")
        conn.register(view, df)
        conn.execute(f"INSERT INTO {table} ({cols}) SELECT {cols} FROM {view}")
        conn.unregister(view)
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise
    logger.info("{}: {} rows", table, df.height)


def load_frames(conn: duckdb.DuckDBPyConnection, deaths: pl.DataFrame, vaccinations: pl.DataFrame) -> dict:
    """Store parsed frames, refresh views and validate."""
    replace_table(conn, "deaths", deaths, DEATHS_COLUMNS)
    replace_table(conn, "vaccinations", vaccinations, VACCINATIONS_COLUMNS)
    init_views(conn)

    result = validate_dataset(conn)
    if result["valid"]:
        logger.info("Validation OK: {}", result["stats"])
    else:
        logger.warning("Validation issues: {}", result["issues"])
    return result


def load_all(deaths_csv: Path, vaccinations_csv: Path, strict: bool = True) -> dict:
    """Main load entry point: parse both CSVs and replace the DB tables."""
    logger.info("Loading {} and {}{}", deaths_csv, vaccinations_csv, "" if strict else " [LENIENT]")

    # Parse everything before touching the DB
    deaths = load_deaths_csv(deaths_csv, strict=strict)
    vaccinations = load_vaccinations_csv(vaccinations_csv, strict=strict)

    conn = get_write_connection()
    try:
        result = load_frames(conn, deaths, vaccinations)
    finally:
        conn.close()

    logger.info("Load complete!")
    return result
