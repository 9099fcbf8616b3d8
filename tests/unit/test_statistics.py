"""Tests for statistics module."""

from datetime import date

import polars as pl
import pytest

from app.services.covid import statistics


def _rows(df: pl.DataFrame, location: str) -> list[dict]:
    return df.filter(pl.col("location") == location).to_dicts()


class TestFilterByContinent:
    def test_drops_aggregate_regions(self, deaths):
        result = statistics.filter_by_continent(deaths)
        assert "World" not in result["location"].to_list()
        assert result.height == 5

    def test_ordered_by_continent_then_location(self, deaths):
        result = statistics.filter_by_continent(deaths)
        assert result["continent"].to_list() == ["Asia", "Asia", "Europe", "Europe", "Europe"]

    def test_accepts_dict_rows(self):
        rows = [
            {"location": "B", "continent": "Europe", "total_cases": 1},
            {"location": "A", "continent": "Europe", "total_cases": 2},
            {"location": "World", "continent": None, "total_cases": 3},
        ]
        result = statistics.filter_by_continent(rows)
        assert result["location"].to_list() == ["A", "B"]

    def test_does_not_mutate_input(self, deaths):
        before = deaths.clone()
        statistics.filter_by_continent(deaths)
        assert deaths.equals(before)


class TestOverview:
    def test_columns(self, deaths):
        result = statistics.location_overview(deaths)
        assert result.columns == ["location", "date", "total_cases", "new_cases", "total_deaths", "population"]
        assert result["location"].to_list()[0] == "Testland"


class TestDeathRate:
    def test_testland(self, deaths):
        rows = _rows(statistics.death_rate(deaths), "Testland")
        assert rows[0]["death_percentage"] == 5.0

    def test_matches_formula_where_cases_positive(self, deaths):
        result = statistics.death_rate(deaths).filter(pl.col("total_cases") > 0)
        for r in result.iter_rows(named=True):
            if r["total_deaths"] is not None:
                assert r["death_percentage"] == r["total_deaths"] / r["total_cases"] * 100

    def test_zero_cases_is_null(self, deaths):
        rows = _rows(statistics.death_rate(deaths), "Zeroland")
        assert rows[0]["total_cases"] == 0
        assert rows[0]["death_percentage"] is None

    def test_missing_deaths_is_null(self, deaths):
        rows = _rows(statistics.death_rate(deaths), "Zeroland")
        assert rows[1]["death_percentage"] is None

    def test_location_pattern(self, deaths):
        result = statistics.death_rate(deaths, location_pattern="TEST")
        assert set(result["location"].to_list()) == {"Testland"}

    def test_location_pattern_skips_regions(self, deaths):
        assert statistics.death_rate(deaths, location_pattern="world").height == 0


class TestInfectionRate:
    def test_testland(self, deaths):
        rows = _rows(statistics.infection_rate(deaths), "Testland")
        assert rows[0]["percent_population_infected"] == 20.0

    def test_non_decreasing_for_cumulative_cases(self, deaths):
        values = _rows(statistics.infection_rate(deaths), "Testland")
        rates = [r["percent_population_infected"] for r in values]
        assert rates == sorted(rates)

    def test_zero_population_is_null(self):
        rows = [{"location": "Empty", "date": date(2021, 1, 1), "population": 0, "total_cases": 5}]
        result = statistics.infection_rate(rows)
        assert result["percent_population_infected"].to_list() == [None]


class TestMaxInfection:
    def test_per_location(self, deaths):
        result = statistics.max_infection_by_location(deaths)
        testland = _rows(result, "Testland")[0]
        assert testland["highest_infection_count"] == 300
        assert testland["percent_population_infected"] == 30.0

    def test_sorted_descending(self, deaths):
        result = statistics.max_infection_by_location(deaths)
        assert result["location"].to_list() == ["Testland", "World", "Zeroland"]


class TestMaxDeaths:
    def test_by_location(self, deaths):
        result = statistics.max_deaths_by_location(deaths)
        assert result.to_dicts() == [
            {"location": "Testland", "total_death_count": 20},
            {"location": "Zeroland", "total_death_count": 0},
        ]

    def test_equals_max_of_location_rows(self, deaths):
        result = statistics.max_deaths_by_location(deaths)
        expected = deaths.filter(pl.col("location") == "Testland")["total_deaths"].max()
        assert _rows(result, "Testland")[0]["total_death_count"] == expected

    def test_by_continent(self, deaths):
        result = statistics.max_deaths_by_continent(deaths)
        assert result["continent"].to_list() == ["Europe", "Asia"]
        assert result["total_death_count"].to_list() == [20, 0]


class TestGlobalTotals:
    def test_sums_country_rows(self, deaths):
        row = statistics.global_totals(deaths).row(0, named=True)
        assert row["total_cases"] == 350
        assert row["total_deaths"] == 20
        assert row["death_percentage"] == pytest.approx(20 / 350 * 100)

    def test_no_cases(self):
        rows = [{"location": "A", "continent": "Europe", "new_cases": 0, "new_deaths": 0}]
        row = statistics.global_totals(rows).row(0, named=True)
        assert row["death_percentage"] is None

    def test_empty(self, deaths):
        row = statistics.global_totals(deaths.clear()).row(0, named=True)
        assert row == {"total_cases": 0, "total_deaths": 0, "death_percentage": None}


class TestRollingVaccinations:
    def test_null_counts_as_zero(self, deaths, vaccinations):
        result = statistics.rolling_vaccinations(deaths, vaccinations)
        rows = _rows(result, "Testland")
        assert [r["rolling_people_vaccinated"] for r in rows] == [100, 100, 150]
        assert [r["new_vaccinations"] for r in rows] == [100, None, 50]

    def test_resets_per_location(self, deaths, vaccinations):
        result = statistics.rolling_vaccinations(deaths, vaccinations)
        assert [r["rolling_people_vaccinated"] for r in _rows(result, "Zeroland")] == [20]

    def test_inner_join(self, deaths, vaccinations):
        result = statistics.rolling_vaccinations(deaths, vaccinations)
        # Zeroland 2021-01-02 has no vaccination row, Nowhere has no deaths row
        assert len(_rows(result, "Zeroland")) == 1
        assert _rows(result, "Nowhere") == []

    def test_excludes_regions(self, deaths, vaccinations):
        result = statistics.rolling_vaccinations(deaths, vaccinations)
        assert "World" not in result["location"].to_list()

    def test_all_locations(self, deaths, vaccinations):
        result = statistics.rolling_vaccinations(deaths, vaccinations, continent_only=False)
        assert [r["rolling_people_vaccinated"] for r in _rows(result, "World")] == [500]

    def test_unsorted_input(self, deaths, vaccinations):
        result = statistics.rolling_vaccinations(deaths.reverse(), vaccinations.reverse())
        assert [r["rolling_people_vaccinated"] for r in _rows(result, "Testland")] == [100, 100, 150]

    def test_non_decreasing(self, deaths, vaccinations):
        result = statistics.rolling_vaccinations(deaths, vaccinations)
        for location in result["location"].unique().to_list():
            values = [r["rolling_people_vaccinated"] for r in _rows(result, location)]
            assert values == sorted(values)

    def test_columns(self, deaths, vaccinations):
        result = statistics.rolling_vaccinations(deaths, vaccinations)
        assert result.columns == [
            "continent",
            "location",
            "date",
            "population",
            "new_vaccinations",
            "rolling_people_vaccinated",
        ]


class TestPercentPopulationVaccinated:
    def test_appends_percentage(self, deaths, vaccinations):
        rolling = statistics.rolling_vaccinations(deaths, vaccinations)
        result = statistics.percent_population_vaccinated(rolling)
        assert [r["percent_population_vaccinated"] for r in _rows(result, "Testland")] == [10.0, 10.0, 15.0]
        assert _rows(result, "Zeroland")[0]["percent_population_vaccinated"] == 4.0

    def test_zero_population(self):
        rolling = pl.DataFrame({"population": [0], "rolling_people_vaccinated": [10]})
        result = statistics.percent_population_vaccinated(rolling)
        assert result["percent_population_vaccinated"].to_list() == [None]


class TestEndToEnd:
    def test_testland_example(self):
        row = {
            "location": "Testland",
            "date": date(2021, 1, 1),
            "continent": "Europe",
            "total_cases": 200,
            "total_deaths": 10,
            "population": 1000,
        }
        assert statistics.death_rate([row])["death_percentage"].to_list() == [5.0]
        assert statistics.infection_rate([row])["percent_population_infected"].to_list() == [20.0]
