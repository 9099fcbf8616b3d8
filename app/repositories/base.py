"""Base repository class."""

from collections.abc import Callable
from typing import Any

import polars as pl
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Shared DuckDB access for the read side.

    Query results are memoized per instance, so a repository sees the
    tables as they were when first read.
    """

    def __init__(self, read_only: bool = True):
        self._db = get_db(read_only)
        self._cache: dict[str, Any] = {}
        logger.debug("{} initialized", self.__class__.__name__)

    def _cached(self, key: str, fn: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = fn()
            logger.debug("Cache miss: {}", key)
        return self._cache[key]

    def execute(self, query: str, params: list | None = None) -> Any:
        return self._db.execute(query, params) if params else self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        return self.execute(query, params).fetchone()

    def fetch_frame(self, query: str, params: list | None = None) -> pl.DataFrame:
        """Execute and return the result as a polars DataFrame."""
        return self.execute(query, params).pl()

    def table_count(self, table: str) -> int:
        """Row count of a table or view."""
        return self.fetchone(f"SELECT COUNT(*) FROM {table}")[0]
