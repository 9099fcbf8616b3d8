"""COVID domain models - deaths, vaccinations, the vaccination view and result entities."""

from app.models.covid.deaths import DEATHS_COLUMNS, DEATHS_DDL, DEATHS_INDEXES
from app.models.covid.entities import (
    DeathCount,
    DeathRate,
    GlobalTotals,
    InfectionRate,
    LocationInfection,
    VaccinationProgress,
)
from app.models.covid.vaccinations import VACCINATIONS_COLUMNS, VACCINATIONS_DDL, VACCINATIONS_INDEXES
from app.models.covid.views import PERCENT_POPULATION_VACCINATED, PERCENT_POPULATION_VACCINATED_DDL

__all__ = [
    "DEATHS_DDL",
    "DEATHS_COLUMNS",
    "DEATHS_INDEXES",
    "VACCINATIONS_DDL",
    "VACCINATIONS_COLUMNS",
    "VACCINATIONS_INDEXES",
    "PERCENT_POPULATION_VACCINATED",
    "PERCENT_POPULATION_VACCINATED_DDL",
    "DeathRate",
    "InfectionRate",
    "LocationInfection",
    "DeathCount",
    "GlobalTotals",
    "VaccinationProgress",
]
