"""ETL package - CSV loading into the database."""

from etl.errors import DataLoadError, RowIssue, SchemaError
from etl.loader import load_deaths_csv, load_vaccinations_csv
from etl.sync import load_all, load_frames

__all__ = [
    "load_all",
    "load_frames",
    "load_deaths_csv",
    "load_vaccinations_csv",
    "DataLoadError",
    "SchemaError",
    "RowIssue",
]
