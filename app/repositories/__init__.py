"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.covid import DeathsRepository, VaccinationRepository
from app.repositories.db import (
    close_db,
    get_db,
    get_write_connection,
    init_tables,
    init_views,
)

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    "init_views",
    "get_write_connection",
    # Base
    "BaseRepository",
    # COVID
    "DeathsRepository",
    "VaccinationRepository",
]
