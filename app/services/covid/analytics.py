"""COVID analytics service."""

from pathlib import Path

import polars as pl
from loguru import logger

from app.models.covid import (
    DeathCount,
    DeathRate,
    GlobalTotals,
    InfectionRate,
    LocationInfection,
    VaccinationProgress,
)
from app.repositories.covid import DeathsRepository, VaccinationRepository
from app.services.covid import statistics


class CovidAnalytics:
    """One method per analysis over the loaded deaths and vaccinations tables."""

    def __init__(
        self,
        deaths_repo: DeathsRepository,
        vaccination_repo: VaccinationRepository,
    ):
        self._deaths = deaths_repo
        self._vaccinations = vaccination_repo
        logger.debug("CovidAnalytics initialized")

    # ========== Deaths ==========

    def continent_rows(self) -> pl.DataFrame:
        """Raw deaths rows with a continent."""
        return statistics.filter_by_continent(self._deaths.get_deaths())

    def overview(self) -> pl.DataFrame:
        """Cases, deaths and population per country and day."""
        return statistics.location_overview(self._deaths.get_deaths())

    def death_rates(self, location_pattern: str | None = None) -> list[DeathRate]:
        """Death percentage per location and day."""
        df = statistics.death_rate(self._deaths.get_deaths(), location_pattern)
        logger.info("Computed death rates: {} rows", df.height)
        return DeathRate.from_rows(df.to_dicts())

    def infection_rates(self, location: str | None = None) -> list[InfectionRate]:
        """Percent of population infected per location and day."""
        df = self._deaths.get_deaths()
        if location is not None:
            df = df.filter(pl.col("location") == location)
        result = statistics.infection_rate(df)
        logger.info("Computed infection rates: {} rows", result.height)
        return InfectionRate.from_rows(result.to_dicts())

    def infection_by_location(self) -> list[LocationInfection]:
        """Locations ranked by highest infection rate."""
        df = statistics.max_infection_by_location(self._deaths.get_deaths())
        logger.info("Computed infection ranking for {} locations", df.height)
        return LocationInfection.from_rows(df.to_dicts())

    def deaths_by_location(self) -> list[DeathCount]:
        """Countries ranked by total death count."""
        df = statistics.max_deaths_by_location(self._deaths.get_deaths())
        return DeathCount.from_rows(df.rename({"location": "name"}).to_dicts())

    def deaths_by_continent(self) -> list[DeathCount]:
        """Continents ranked by total death count."""
        df = statistics.max_deaths_by_continent(self._deaths.get_deaths())
        return DeathCount.from_rows(df.rename({"continent": "name"}).to_dicts())

    def global_totals(self) -> GlobalTotals:
        """Worldwide cases, deaths and death percentage."""
        row = statistics.global_totals(self._deaths.get_deaths()).row(0, named=True)
        logger.info("Global totals: {} cases, {} deaths", row["total_cases"], row["total_deaths"])
        return GlobalTotals(**row)

    # ========== Vaccinations ==========

    def rolling_vaccinations(self, continent_only: bool = True) -> pl.DataFrame:
        """Running vaccination totals per location."""
        return statistics.rolling_vaccinations(
            self._deaths.get_deaths(),
            self._vaccinations.get_vaccinations(),
            continent_only=continent_only,
        )

    def percent_population_vaccinated(self, location: str | None = None) -> list[VaccinationProgress]:
        """Rows of the PercentPopulationVaccinated view."""
        df = self._vaccinations.get_percent_population_vaccinated(location)
        return VaccinationProgress.from_rows(df.to_dicts())

    # ========== Export ==========

    def reports(self, location_pattern: str | None = None) -> dict[str, pl.DataFrame]:
        """All analyses as named tables."""
        deaths = self._deaths.get_deaths()
        rolling = self.rolling_vaccinations()
        return {
            "continent_rows": statistics.filter_by_continent(deaths),
            "overview": statistics.location_overview(deaths),
            "death_rate": statistics.death_rate(deaths, location_pattern),
            "infection_rate": statistics.infection_rate(deaths),
            "infection_by_location": statistics.max_infection_by_location(deaths),
            "deaths_by_location": statistics.max_deaths_by_location(deaths),
            "deaths_by_continent": statistics.max_deaths_by_continent(deaths),
            "global_totals": statistics.global_totals(deaths),
            "rolling_vaccinations": rolling,
            "percent_population_vaccinated": statistics.percent_population_vaccinated(rolling),
        }

    def export_all(self, out_dir: Path, location_pattern: str | None = None) -> list[Path]:
        """Write every analysis to out_dir as CSV."""
        out_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for name, df in self.reports(location_pattern).items():
            path = out_dir / f"{name}.csv"
            df.write_csv(path)
            logger.debug("Exported {} ({} rows)", path, df.height)
            written.append(path)
        logger.info("Exported {} reports to {}", len(written), out_dir)
        return written
