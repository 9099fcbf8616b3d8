"""COVID domain entities - computed analytics results."""

from dataclasses import dataclass
from datetime import date

from app.models.common import BaseEntity


@dataclass
class DeathRate(BaseEntity):
    """Share of confirmed cases that died."""

    location: str
    date: date
    total_cases: int | None
    total_deaths: int | None
    death_percentage: float | None


@dataclass
class InfectionRate(BaseEntity):
    """Share of the population confirmed infected."""

    location: str
    date: date
    population: int | None
    total_cases: int | None
    percent_population_infected: float | None


@dataclass
class LocationInfection(BaseEntity):
    """Peak infection figures for a location."""

    location: str
    population: int | None
    highest_infection_count: int | None
    percent_population_infected: float | None


@dataclass
class DeathCount(BaseEntity):
    """Highest cumulative death count for a location or continent."""

    name: str
    total_death_count: int | None


@dataclass
class GlobalTotals(BaseEntity):
    """Worldwide sums over country rows."""

    total_cases: int
    total_deaths: int
    death_percentage: float | None


@dataclass
class VaccinationProgress(BaseEntity):
    """One row of PercentPopulationVaccinated."""

    continent: str | None
    location: str
    date: date
    population: int | None
    new_vaccinations: int | None
    rolling_people_vaccinated: int
    percent_population_vaccinated: float | None = None
