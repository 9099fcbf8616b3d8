"""Dependency Injection container - initialized at app startup."""

from app.repositories import db
from app.repositories.covid.deaths import DeathsRepository
from app.repositories.covid.vaccinations import VaccinationRepository
from app.services.covid.analytics import CovidAnalytics


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self._deaths_repo = DeathsRepository()
        self._vaccination_repo = VaccinationRepository()

        # Services (with injected repos)
        self.covid_analytics = CovidAnalytics(
            deaths_repo=self._deaths_repo,
            vaccination_repo=self._vaccination_repo,
        )

        self._initialized = True

    def reset(self) -> None:
        """Close the connection and drop all instances so the next init() reconnects."""
        db.close_db()
        self._initialized = False

    @property
    def deaths(self) -> DeathsRepository:
        return self._deaths_repo


# Global container instance
container = Container()
