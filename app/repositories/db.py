"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL, ALL_VIEWS
from settings import DB_PATH

_local = threading.local()


def db_exists() -> bool:
    """Check if database file exists."""
    return Path(DB_PATH).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if both source tables already exist."""
    result = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables WHERE table_name IN ('deaths', 'vaccinations')"
    ).fetchone()
    return result[0] == 2


def init_views(conn: duckdb.DuckDBPyConnection) -> None:
    """(Re)create derived views."""
    for ddl in ALL_VIEWS:
        conn.execute(ddl)
    logger.debug("DB views initialized")


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize tables and views (idempotent - uses IF NOT EXISTS)."""
    if not _tables_exist(conn):
        for ddl in ALL_DDL:
            conn.execute(ddl)
        logger.info("DB tables initialized")
    init_views(conn)


def _ensure_db_exists() -> None:
    """Create DB with schema if it doesn't exist."""
    if not db_exists():
        logger.warning("DB not found: {}. Creating empty DB.", DB_PATH)
        conn = duckdb.connect(DB_PATH)
        init_tables(conn)
        conn.close()


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if getattr(_local, "conn", None) is None:
        _ensure_db_exists()
        _local.conn = duckdb.connect(DB_PATH, read_only=read_only)
        logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if getattr(_local, "conn", None) is not None:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """Get a writable connection (for loading data)."""
    conn = duckdb.connect(DB_PATH)
    init_tables(conn)
    return conn
