"""Models package - DDL and entities."""

from app.models.common import BaseEntity
from app.models.covid import (
    DEATHS_DDL,
    DEATHS_INDEXES,
    PERCENT_POPULATION_VACCINATED,
    PERCENT_POPULATION_VACCINATED_DDL,
    VACCINATIONS_DDL,
    VACCINATIONS_INDEXES,
    DeathCount,
    DeathRate,
    GlobalTotals,
    InfectionRate,
    LocationInfection,
    VaccinationProgress,
)

ALL_DDL = [
    DEATHS_DDL,
    VACCINATIONS_DDL,
    *DEATHS_INDEXES,
    *VACCINATIONS_INDEXES,
]

# Views depend on the tables above
ALL_VIEWS = [
    PERCENT_POPULATION_VACCINATED_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Entities
    "DeathRate",
    "InfectionRate",
    "LocationInfection",
    "DeathCount",
    "GlobalTotals",
    "VaccinationProgress",
    # DDL
    "PERCENT_POPULATION_VACCINATED",
    "ALL_DDL",
    "ALL_VIEWS",
]
