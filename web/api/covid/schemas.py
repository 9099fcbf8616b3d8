"""COVID API response schemas."""

from datetime import date

from pydantic import BaseModel


class DeathRateItem(BaseModel):
    """Death percentage for a location on a day."""

    location: str
    date: date
    total_cases: int | None
    total_deaths: int | None
    death_percentage: float | None


class DeathRatesResponse(BaseModel):
    """Death rates response."""

    location_pattern: str | None
    items: list[DeathRateItem]


class InfectionRateItem(BaseModel):
    """Infection percentage for a location on a day."""

    location: str
    date: date
    population: int | None
    total_cases: int | None
    percent_population_infected: float | None


class InfectionRatesResponse(BaseModel):
    """Infection rates response."""

    location: str | None
    items: list[InfectionRateItem]


class LocationInfectionItem(BaseModel):
    """Peak infection figures for a location."""

    location: str
    population: int | None
    highest_infection_count: int | None
    percent_population_infected: float | None


class LocationInfectionResponse(BaseModel):
    """Infection ranking response."""

    items: list[LocationInfectionItem]


class DeathCountItem(BaseModel):
    """Total death count for a location or continent."""

    name: str
    total_death_count: int | None


class DeathCountsResponse(BaseModel):
    """Death ranking response."""

    group_by: str
    items: list[DeathCountItem]


class GlobalTotalsResponse(BaseModel):
    """Worldwide totals response."""

    total_cases: int
    total_deaths: int
    death_percentage: float | None


class VaccinationItem(BaseModel):
    """One row of PercentPopulationVaccinated."""

    continent: str | None
    location: str
    date: date
    population: int | None
    new_vaccinations: int | None
    rolling_people_vaccinated: int
    percent_population_vaccinated: float | None


class VaccinationResponse(BaseModel):
    """Vaccination progress response."""

    location: str | None
    items: list[VaccinationItem]


class LocationsResponse(BaseModel):
    """Available locations and continents."""

    locations: list[str]
    continents: list[str]
