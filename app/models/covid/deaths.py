"""Deaths table - cases and deaths per location per day."""

DEATHS_DDL = """
CREATE TABLE IF NOT EXISTS deaths (
    location VARCHAR NOT NULL,
    date DATE NOT NULL,
    continent VARCHAR,
    population BIGINT,
    total_cases BIGINT,
    new_cases BIGINT,
    total_deaths BIGINT,
    new_deaths BIGINT
)
"""

DEATHS_COLUMNS = [
    "location",
    "date",
    "continent",
    "population",
    "total_cases",
    "new_cases",
    "total_deaths",
    "new_deaths",
]

DEATHS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_deaths_location ON deaths(location, date)",
]
