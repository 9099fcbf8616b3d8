"""COVID repositories."""

from app.repositories.covid.deaths import DeathsRepository
from app.repositories.covid.vaccinations import VaccinationRepository

__all__ = [
    "DeathsRepository",
    "VaccinationRepository",
]
