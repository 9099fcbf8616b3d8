"""Tests for API views."""

import pytest

from app.container import container
from web.api import covid
from web.api.errors import NotFoundError, ValidationError


@pytest.fixture
def api(loaded_db):
    container.init()
    return covid


class TestCovidViews:
    def test_locations(self, api):
        resp = api.get_locations()
        assert resp.locations == ["Testland", "Zeroland"]
        assert resp.continents == ["Asia", "Europe"]

    def test_death_rates(self, api):
        resp = api.get_death_rates("land")
        assert resp.items[0].death_percentage == 5.0
        assert {i.location for i in resp.items} == {"Testland", "Zeroland"}

    def test_blank_pattern(self, api):
        with pytest.raises(ValidationError):
            api.get_death_rates("  ")

    def test_unknown_location(self, api):
        with pytest.raises(NotFoundError) as exc:
            api.get_percent_population_vaccinated("Atlantis")
        assert "Atlantis" in exc.value.message

    def test_vaccination(self, api):
        resp = api.get_percent_population_vaccinated("Testland")
        assert [i.percent_population_vaccinated for i in resp.items] == [10.0, 10.0, 15.0]

    def test_global_totals(self, api):
        resp = api.get_global_totals()
        assert resp.death_percentage == round(20 / 350 * 100, 4)

    def test_deaths_by_location(self, api):
        resp = api.get_deaths_by_location()
        assert resp.group_by == "location"
        assert resp.items[0].name == "Testland"

    def test_infection_ranking(self, api):
        resp = api.get_infection_by_location()
        assert resp.items[0].location == "Testland"
        assert resp.items[0].highest_infection_count == 300
