"""Tests for DuckDB repositories and the PercentPopulationVaccinated view."""

import duckdb
import pytest

from app.container import container
from app.repositories import DeathsRepository, VaccinationRepository, get_db
from app.services.covid import statistics


class TestDeathsRepository:
    def test_round_trip(self, loaded_db, deaths):
        repo = DeathsRepository()
        assert repo.count() == deaths.height
        assert VaccinationRepository().count() == 6
        assert repo.get_deaths().sort(["location", "date"]).equals(deaths.sort(["location", "date"]))

    def test_locations(self, loaded_db):
        repo = DeathsRepository()
        assert repo.get_locations() == ["Testland", "Zeroland"]
        assert repo.get_locations(countries_only=False) == ["Testland", "World", "Zeroland"]

    def test_continents(self, loaded_db):
        assert DeathsRepository().get_continents() == ["Asia", "Europe"]

    def test_read_only(self, loaded_db):
        DeathsRepository()
        with pytest.raises(duckdb.Error):
            get_db().execute("DELETE FROM deaths")


class TestPercentPopulationVaccinatedView:
    def test_matches_polars_pipeline(self, loaded_db, deaths, vaccinations):
        view = VaccinationRepository().get_percent_population_vaccinated()
        expected = statistics.percent_population_vaccinated(statistics.rolling_vaccinations(deaths, vaccinations))

        assert view.columns == expected.columns
        assert view.height == expected.height
        for got, want in zip(view.iter_rows(named=True), expected.iter_rows(named=True)):
            assert got["location"] == want["location"]
            assert got["date"] == want["date"]
            assert got["rolling_people_vaccinated"] == want["rolling_people_vaccinated"]
            assert got["percent_population_vaccinated"] == pytest.approx(want["percent_population_vaccinated"])

    def test_single_location(self, loaded_db):
        view = VaccinationRepository().get_percent_population_vaccinated("Testland")
        assert view["rolling_people_vaccinated"].to_list() == [100, 100, 150]

    def test_queryable_by_name(self, loaded_db):
        VaccinationRepository()
        rows = get_db().execute(
            "SELECT location, rolling_people_vaccinated FROM PercentPopulationVaccinated WHERE location = 'Zeroland'"
        ).fetchall()
        assert rows == [("Zeroland", 20)]

    def test_empty_db_has_view(self, db_path):
        assert VaccinationRepository().get_percent_population_vaccinated().height == 0


class TestContainer:
    def test_reset_closes_connection(self, loaded_db):
        container.init()
        first = get_db()
        container.reset()
        with pytest.raises(duckdb.ConnectionException):
            first.execute("SELECT 1")
        container.init()
        assert get_db() is not first
        assert container.deaths.count() == 6
