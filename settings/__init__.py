"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("COVID_DB_PATH", "covid.duckdb")

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("COVID_LOG_LEVEL", "INFO")

# Input data (both tables can be read from the combined OWID file)
DATA_DIR = Path(os.getenv("COVID_DATA_DIR", "data"))
DEATHS_CSV = Path(os.getenv("COVID_DEATHS_CSV", str(DATA_DIR / "owid-covid-data.csv")))
VACCINATIONS_CSV = Path(os.getenv("COVID_VACCINATIONS_CSV", str(DATA_DIR / "owid-covid-data.csv")))
DATE_FORMAT = os.getenv("COVID_DATE_FORMAT", "%Y-%m-%d")

# Output
EXPORT_DIR = Path(os.getenv("COVID_EXPORT_DIR", "exports"))

# Download
DATASET_URL = os.getenv("COVID_DATASET_URL", "https://covid.ourworldindata.org/data/owid-covid-data.csv")
DOWNLOAD_TIMEOUT = int(os.getenv("COVID_DOWNLOAD_TIMEOUT", "120"))
