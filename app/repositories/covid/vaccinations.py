"""Vaccination repository - vaccinations table and the PercentPopulationVaccinated view."""

import polars as pl
from loguru import logger

from app.models.covid import PERCENT_POPULATION_VACCINATED, VACCINATIONS_COLUMNS
from app.repositories.base import BaseRepository


class VaccinationRepository(BaseRepository):
    """Repository for vaccination data access."""

    def get_vaccinations(self) -> pl.DataFrame:
        """Get all vaccination rows ordered by location and date."""

        def fetch():
            df = self.fetch_frame(
                f"SELECT {', '.join(VACCINATIONS_COLUMNS)} FROM vaccinations ORDER BY location, date"
            )
            logger.debug("get_vaccinations(): {} rows", df.height)
            return df

        return self._cached("vaccinations", fetch)

    def get_percent_population_vaccinated(self, location: str | None = None) -> pl.DataFrame:
        """Read the PercentPopulationVaccinated view, optionally for one location."""

        def fetch():
            query = f"SELECT * FROM {PERCENT_POPULATION_VACCINATED}"
            params = None
            if location is not None:
                query += " WHERE location = ?"
                params = [location]
            query += " ORDER BY location, date"
            df = self.fetch_frame(query, params)
            logger.debug("get_percent_population_vaccinated({}): {} rows", location, df.height)
            return df

        return self._cached(f"percent_vaccinated_{location or 'all'}", fetch)

    def count(self) -> int:
        """Number of rows in the vaccinations table."""
        return self.table_count("vaccinations")
