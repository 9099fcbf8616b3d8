"""Tests for the analytics service."""

import polars as pl
import pytest

from app.models.covid import DeathCount, GlobalTotals
from app.repositories import DeathsRepository, VaccinationRepository
from app.services.covid.analytics import CovidAnalytics


@pytest.fixture
def analytics(loaded_db) -> CovidAnalytics:
    return CovidAnalytics(deaths_repo=DeathsRepository(), vaccination_repo=VaccinationRepository())


class TestCovidAnalytics:
    def test_death_rates(self, analytics):
        rates = analytics.death_rates("testland")
        assert [r.death_percentage for r in rates] == [5.0, 5.0, pytest.approx(20 / 300 * 100)]

    def test_infection_rates_for_location(self, analytics):
        rates = analytics.infection_rates("Testland")
        assert [r.percent_population_infected for r in rates] == [20.0, 30.0, 30.0]

    def test_deaths_by_continent(self, analytics):
        assert analytics.deaths_by_continent() == [
            DeathCount(name="Europe", total_death_count=20),
            DeathCount(name="Asia", total_death_count=0),
        ]

    def test_global_totals(self, analytics):
        totals = analytics.global_totals()
        assert isinstance(totals, GlobalTotals)
        assert (totals.total_cases, totals.total_deaths) == (350, 20)

    def test_percent_population_vaccinated(self, analytics):
        rows = analytics.percent_population_vaccinated("Testland")
        assert [r.rolling_people_vaccinated for r in rows] == [100, 100, 150]
        assert rows[-1].to_dict()["percent_population_vaccinated"] == 15.0

    def test_rolling_all_locations(self, analytics):
        df = analytics.rolling_vaccinations(continent_only=False)
        assert "World" in df["location"].to_list()

    def test_export_all(self, analytics, tmp_path):
        written = analytics.export_all(tmp_path / "out")
        names = {p.stem for p in written}
        assert "percent_population_vaccinated" in names
        assert "global_totals" in names
        totals = pl.read_csv(tmp_path / "out" / "global_totals.csv")
        assert totals["total_cases"].to_list() == [350]
