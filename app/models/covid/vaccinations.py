"""Vaccinations table - new vaccinations per location per day."""

VACCINATIONS_DDL = """
CREATE TABLE IF NOT EXISTS vaccinations (
    location VARCHAR NOT NULL,
    date DATE NOT NULL,
    new_vaccinations BIGINT
)
"""

VACCINATIONS_COLUMNS = [
    "location",
    "date",
    "new_vaccinations",
]

VACCINATIONS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_vaccinations_location ON vaccinations(location, date)",
]
