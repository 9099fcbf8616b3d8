"""Deaths repository - access to cases, deaths and population data."""

import polars as pl
from loguru import logger

from app.models.covid import DEATHS_COLUMNS
from app.repositories.base import BaseRepository


class DeathsRepository(BaseRepository):
    """Repository for the deaths table."""

    def get_deaths(self) -> pl.DataFrame:
        """Get all deaths rows ordered by location and date."""

        def fetch():
            df = self.fetch_frame(f"SELECT {', '.join(DEATHS_COLUMNS)} FROM deaths ORDER BY location, date")
            logger.debug("get_deaths(): {} rows", df.height)
            return df

        return self._cached("deaths", fetch)

    def get_locations(self, countries_only: bool = True) -> list[str]:
        """Get distinct locations, optionally without aggregate regions."""

        def fetch():
            query = "SELECT DISTINCT location FROM deaths"
            if countries_only:
                query += " WHERE continent IS NOT NULL"
            query += " ORDER BY location"
            return [r[0] for r in self.fetchall(query)]

        return self._cached(f"locations_{'countries' if countries_only else 'all'}", fetch)

    def get_continents(self) -> list[str]:
        """Get distinct continents."""
        rows = self.fetchall("SELECT DISTINCT continent FROM deaths WHERE continent IS NOT NULL ORDER BY continent")
        return [r[0] for r in rows]

    def count(self) -> int:
        """Number of rows in the deaths table."""
        return self.table_count("deaths")
