"""Shared fixtures: small deaths/vaccinations tables and a temporary DuckDB."""

from datetime import date

import polars as pl
import pytest

from app.container import container
from app.repositories import db
from app.services.covid.statistics import DEATHS_SCHEMA, VACCINATIONS_SCHEMA
from etl.sync import load_frames

D1, D2, D3 = date(2021, 1, 1), date(2021, 1, 2), date(2021, 1, 3)


@pytest.fixture
def deaths() -> pl.DataFrame:
    # location, date, continent, population, total_cases, new_cases, total_deaths, new_deaths
    rows = [
        ("Testland", D1, "Europe", 1000, 200, 200, 10, 10),
        ("Testland", D2, "Europe", 1000, 300, 100, 15, 5),
        ("Testland", D3, "Europe", 1000, 300, 0, 20, 5),
        ("Zeroland", D1, "Asia", 500, 0, 0, 0, 0),
        ("Zeroland", D2, "Asia", 500, 50, 50, None, None),
        ("World", D1, None, 10000, 1000, 1000, 100, 100),
    ]
    return pl.DataFrame(rows, schema=DEATHS_SCHEMA, orient="row")


@pytest.fixture
def vaccinations() -> pl.DataFrame:
    rows = [
        ("Testland", D1, 100),
        ("Testland", D2, None),
        ("Testland", D3, 50),
        ("Zeroland", D1, 20),
        ("World", D1, 500),
        ("Nowhere", D1, 10),
    ]
    return pl.DataFrame(rows, schema=VACCINATIONS_SCHEMA, orient="row")


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the connection layer at a temporary database file."""
    path = str(tmp_path / "test.duckdb")
    monkeypatch.setattr(db, "DB_PATH", path)
    yield path
    db.close_db()
    container.reset()


@pytest.fixture
def loaded_db(db_path, deaths, vaccinations):
    """Temporary database holding the sample tables."""
    conn = db.get_write_connection()
    result = load_frames(conn, deaths, vaccinations)
    conn.close()
    return result
