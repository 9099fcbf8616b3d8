"""COVID statistics - pure table functions over polars DataFrames.

Every function takes in-memory tables and returns a new table; inputs are
never mutated. Rows are accepted either as a ``pl.DataFrame`` or as a list of
dicts keyed by column name.

Null handling follows SQL aggregate semantics:

* a rate whose denominator is 0 or null is null, never an error;
* sums skip nulls, so an all-null column sums to 0;
* the rolling vaccination total counts a null ``new_vaccinations`` as 0.
"""

from typing import Any

import polars as pl

from helpers import formulas

DEATHS_SCHEMA = {
    "location": pl.String,
    "date": pl.Date,
    "continent": pl.String,
    "population": pl.Int64,
    "total_cases": pl.Int64,
    "new_cases": pl.Int64,
    "total_deaths": pl.Int64,
    "new_deaths": pl.Int64,
}

VACCINATIONS_SCHEMA = {
    "location": pl.String,
    "date": pl.Date,
    "new_vaccinations": pl.Int64,
}

Rows = pl.DataFrame | list[dict[str, Any]]


def _as_frame(rows: Rows, schema: dict[str, pl.DataType]) -> pl.DataFrame:
    """Coerce rows to a DataFrame with the expected dtypes for known columns."""
    if not isinstance(rows, pl.DataFrame):
        return pl.DataFrame(rows, schema=schema)
    return rows.with_columns(
        [pl.col(name).cast(dtype) for name, dtype in schema.items() if name in rows.columns]
    )


def _countries(df: pl.DataFrame) -> pl.DataFrame:
    """Drop aggregate regions (World, Europe, ...) which have no continent."""
    return df.filter(pl.col("continent").is_not_null())


def _rate(part: str, whole: str) -> pl.Expr:
    """part / whole * 100, null when whole is 0 or null."""
    return (
        pl.when(pl.col(whole) != 0)
        .then(pl.col(part) / pl.col(whole) * 100)
        .otherwise(pl.lit(None, dtype=pl.Float64))
    )


# ========== Row filters ==========


def filter_by_continent(rows: Rows) -> pl.DataFrame:
    """Rows with a continent, ordered by continent and location."""
    df = _as_frame(rows, DEATHS_SCHEMA)
    return _countries(df).sort(["continent", "location"], maintain_order=True)


def location_overview(rows: Rows) -> pl.DataFrame:
    """Essential case/death/population columns for country rows."""
    df = _as_frame(rows, DEATHS_SCHEMA)
    return (
        _countries(df)
        .select(["location", "date", "total_cases", "new_cases", "total_deaths", "population"])
        .sort(["location", "date"])
    )


# ========== Per-row rates ==========


def death_rate(rows: Rows, location_pattern: str | None = None) -> pl.DataFrame:
    """Likelihood of dying once infected: total_deaths / total_cases * 100.

    ``location_pattern`` keeps country rows whose location contains the
    pattern (case-insensitive).
    """
    df = _as_frame(rows, DEATHS_SCHEMA)
    if location_pattern is not None:
        df = _countries(df).filter(
            pl.col("location").str.to_lowercase().str.contains(location_pattern.lower(), literal=True)
        )
    return df.select(
        "location",
        "date",
        "total_cases",
        "total_deaths",
        _rate("total_deaths", "total_cases").alias("death_percentage"),
    ).sort(["location", "date"])


def infection_rate(rows: Rows) -> pl.DataFrame:
    """Share of the population infected: total_cases / population * 100."""
    df = _as_frame(rows, DEATHS_SCHEMA)
    return df.select(
        "location",
        "date",
        "population",
        "total_cases",
        _rate("total_cases", "population").alias("percent_population_infected"),
    ).sort(["location", "date"])


# ========== Aggregates ==========


def max_infection_by_location(rows: Rows) -> pl.DataFrame:
    """Highest infection count and rate per (location, population)."""
    df = _as_frame(rows, DEATHS_SCHEMA)
    return (
        df.with_columns(_rate("total_cases", "population").alias("percent_population_infected"))
        .group_by(["location", "population"])
        .agg(
            pl.col("total_cases").max().alias("highest_infection_count"),
            pl.col("percent_population_infected").max(),
        )
        .sort(
            ["percent_population_infected", "location"],
            descending=[True, False],
            nulls_last=True,
        )
    )


def _max_deaths_by(df: pl.DataFrame, key: str) -> pl.DataFrame:
    return (
        _countries(df)
        .group_by(key)
        .agg(pl.col("total_deaths").max().alias("total_death_count"))
        .sort(["total_death_count", key], descending=[True, False], nulls_last=True)
    )


def max_deaths_by_location(rows: Rows) -> pl.DataFrame:
    """Highest cumulative death count per country, descending."""
    return _max_deaths_by(_as_frame(rows, DEATHS_SCHEMA), "location")


def max_deaths_by_continent(rows: Rows) -> pl.DataFrame:
    """Highest cumulative death count of any country per continent, descending."""
    return _max_deaths_by(_as_frame(rows, DEATHS_SCHEMA), "continent")


def global_totals(rows: Rows) -> pl.DataFrame:
    """Worldwide new cases/deaths summed over country rows, as a single row."""
    df = _countries(_as_frame(rows, DEATHS_SCHEMA))
    total_cases = int(df["new_cases"].sum())
    total_deaths = int(df["new_deaths"].sum())
    return pl.DataFrame(
        {
            "total_cases": [total_cases],
            "total_deaths": [total_deaths],
            "death_percentage": [formulas.percentage(total_deaths, total_cases)],
        },
        schema={"total_cases": pl.Int64, "total_deaths": pl.Int64, "death_percentage": pl.Float64},
    )


# ========== Vaccinations ==========


def rolling_vaccinations(deaths: Rows, vaccinations: Rows, continent_only: bool = True) -> pl.DataFrame:
    """Running total of new vaccinations per location, in date order.

    Deaths and vaccinations are inner-joined on (location, date), so a key
    missing from either side produces no row.
    """
    left = _as_frame(deaths, DEATHS_SCHEMA).select(["continent", "location", "date", "population"])
    if continent_only:
        left = _countries(left)
    right = _as_frame(vaccinations, VACCINATIONS_SCHEMA).select(["location", "date", "new_vaccinations"])

    return (
        left.join(right, on=["location", "date"], how="inner")
        .sort(["location", "date"])
        .with_columns(
            pl.col("new_vaccinations").fill_null(0).cum_sum().over("location").alias("rolling_people_vaccinated")
        )
        .select(["continent", "location", "date", "population", "new_vaccinations", "rolling_people_vaccinated"])
    )


def percent_population_vaccinated(rolling: pl.DataFrame) -> pl.DataFrame:
    """Append rolling_people_vaccinated / population * 100."""
    return rolling.with_columns(
        _rate("rolling_people_vaccinated", "population").alias("percent_population_vaccinated")
    )
