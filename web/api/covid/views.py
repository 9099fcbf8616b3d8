"""COVID API views - thin layer over services."""

from app.container import container
from helpers.formulas import round_or_none
from web.api.errors import validate_location, validate_pattern

from .schemas import (
    DeathCountItem,
    DeathCountsResponse,
    DeathRateItem,
    DeathRatesResponse,
    GlobalTotalsResponse,
    InfectionRateItem,
    InfectionRatesResponse,
    LocationInfectionItem,
    LocationInfectionResponse,
    LocationsResponse,
    VaccinationItem,
    VaccinationResponse,
)


def get_locations() -> LocationsResponse:
    """Get countries and continents present in the data."""
    return LocationsResponse(
        locations=container.deaths.get_locations(),
        continents=container.deaths.get_continents(),
    )


def get_death_rates(location_pattern: str | None = None) -> DeathRatesResponse:
    """Get death percentage per location and day."""
    validate_pattern(location_pattern)
    data = container.covid_analytics.death_rates(location_pattern)

    items = [
        DeathRateItem(
            location=d.location,
            date=d.date,
            total_cases=d.total_cases,
            total_deaths=d.total_deaths,
            death_percentage=round_or_none(d.death_percentage, 4),
        )
        for d in data
    ]

    return DeathRatesResponse(location_pattern=location_pattern, items=items)


def get_infection_rates(location: str | None = None) -> InfectionRatesResponse:
    """Get percent of population infected per location and day."""
    if location is not None:
        validate_location(location)
    data = container.covid_analytics.infection_rates(location)

    items = [
        InfectionRateItem(
            location=d.location,
            date=d.date,
            population=d.population,
            total_cases=d.total_cases,
            percent_population_infected=round_or_none(d.percent_population_infected, 4),
        )
        for d in data
    ]

    return InfectionRatesResponse(location=location, items=items)


def get_infection_by_location() -> LocationInfectionResponse:
    """Get locations ranked by highest infection rate."""
    data = container.covid_analytics.infection_by_location()

    items = [
        LocationInfectionItem(
            location=d.location,
            population=d.population,
            highest_infection_count=d.highest_infection_count,
            percent_population_infected=round_or_none(d.percent_population_infected, 4),
        )
        for d in data
    ]

    return LocationInfectionResponse(items=items)


def get_deaths_by_location() -> DeathCountsResponse:
    """Get countries ranked by total death count."""
    data = container.covid_analytics.deaths_by_location()
    items = [DeathCountItem(name=d.name, total_death_count=d.total_death_count) for d in data]
    return DeathCountsResponse(group_by="location", items=items)


def get_deaths_by_continent() -> DeathCountsResponse:
    """Get continents ranked by total death count."""
    data = container.covid_analytics.deaths_by_continent()
    items = [DeathCountItem(name=d.name, total_death_count=d.total_death_count) for d in data]
    return DeathCountsResponse(group_by="continent", items=items)


def get_global_totals() -> GlobalTotalsResponse:
    """Get worldwide cases, deaths and death percentage."""
    data = container.covid_analytics.global_totals()

    return GlobalTotalsResponse(
        total_cases=data.total_cases,
        total_deaths=data.total_deaths,
        death_percentage=round_or_none(data.death_percentage, 4),
    )


def get_percent_population_vaccinated(location: str | None = None) -> VaccinationResponse:
    """Get rows of the PercentPopulationVaccinated view."""
    if location is not None:
        validate_location(location)
    data = container.covid_analytics.percent_population_vaccinated(location)

    items = [
        VaccinationItem(
            continent=d.continent,
            location=d.location,
            date=d.date,
            population=d.population,
            new_vaccinations=d.new_vaccinations,
            rolling_people_vaccinated=d.rolling_people_vaccinated,
            percent_population_vaccinated=round_or_none(d.percent_population_vaccinated, 4),
        )
        for d in data
    ]

    return VaccinationResponse(location=location, items=items)
