#!/usr/bin/env python3
"""
Load COVID CSVs into DuckDB and report statistics.

Usage:
    python load_data.py                          # Load default CSVs, validate, print report
    python load_data.py deaths.csv vacc.csv      # Load specific CSVs
    python load_data.py --download               # Download the OWID dataset first, then load it
                                                 # (cannot be combined with explicit CSV paths)
    python load_data.py --lenient                # Drop malformed rows instead of failing
    python load_data.py --validate               # Check data integrity only
    python load_data.py --report                 # Print report only (no load)
    python load_data.py --report --location states
    python load_data.py --export [DIR]           # Write every analysis to CSV (no load)
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import polars as pl  # noqa: E402

from app.repositories import DeathsRepository, VaccinationRepository  # noqa: E402
from app.repositories.db import close_db, db_exists, get_db  # noqa: E402
from app.services.covid.analytics import CovidAnalytics  # noqa: E402
from covid_client import download_datasets  # noqa: E402
from etl import DataLoadError, SchemaError, load_all  # noqa: E402
from etl.validation import validate_dataset  # noqa: E402
from settings import DATA_DIR, DATASET_URL, DB_PATH, DEATHS_CSV, EXPORT_DIR, VACCINATIONS_CSV  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(to_file=True)

FLAGS = ("--download", "--lenient", "--validate", "--report", "--export", "--location")


def print_validation(result: dict) -> bool:
    """Print a validation result, return whether it is valid."""
    stats = result["stats"]
    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    print(f"  Deaths rows: {stats['deaths_rows']:,}")
    print(f"  Vaccination rows: {stats['vaccinations_rows']:,}")
    print(f"  Countries: {stats['locations']:,}")
    print(f"  Aggregate region rows: {stats['aggregate_rows']:,}")
    print(f"  Join coverage: {stats['coverage_pct']}%")
    print(f"  Deaths rows without vaccinations: {stats['deaths_without_vaccinations']:,}")
    print(f"  Vaccination rows without deaths: {stats['vaccinations_without_deaths']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")
    print("=" * 60)
    print("✅ All data valid!" if result["valid"] else "❌ Some issues found.")
    print("=" * 60 + "\n")
    return result["valid"]


def run_validation() -> bool:
    """Validate the database."""
    if not db_exists():
        logger.error("No database at {}. Run 'python load_data.py' first.", DB_PATH)
        return False
    conn = get_db()
    try:
        return print_validation(validate_dataset(conn))
    finally:
        close_db()


def _analytics() -> CovidAnalytics:
    return CovidAnalytics(deaths_repo=DeathsRepository(), vaccination_repo=VaccinationRepository())


def print_report(location_pattern: str | None = None) -> None:
    """Print every analysis."""
    reports = _analytics().reports(location_pattern)
    with pl.Config(tbl_rows=15, tbl_cols=-1, fmt_str_lengths=40):
        for name, df in reports.items():
            print(f"\n## {name} ({df.height:,} rows)")
            print(df)


def export_reports(out_dir: Path, location_pattern: str | None = None) -> None:
    """Write every analysis to CSV."""
    for path in _analytics().export_all(out_dir, location_pattern):
        print(f"  {path}")


def _option_value(args: list[str], flag: str) -> str | None:
    """Value following flag, if any."""
    if flag not in args:
        return None
    i = args.index(flag)
    if i + 1 < len(args) and not args[i + 1].startswith("--"):
        return args[i + 1]
    return None


def main():
    args = sys.argv[1:]
    location = _option_value(args, "--location")

    if "--validate" in args or args == ["validate"]:
        sys.exit(0 if run_validation() else 1)

    if "--report" in args:
        print_report(location)
        return

    if "--export" in args:
        out_dir = _option_value(args, "--export")
        export_reports(Path(out_dir) if out_dir else EXPORT_DIR, location)
        return

    values = {_option_value(args, f) for f in ("--location", "--export")}
    paths = [a for a in args if a not in FLAGS and a not in values]
    if len(paths) not in (0, 2):
        print(__doc__)
        sys.exit(1)

    deaths_csv, vaccinations_csv = (Path(p) for p in paths) if paths else (DEATHS_CSV, VACCINATIONS_CSV)

    if "--download" in args:
        if paths:
            logger.error("--download loads the OWID dataset; it cannot be combined with CSV paths")
            sys.exit(1)
        target = DATA_DIR / "owid-covid-data.csv"
        download_datasets({DATASET_URL: target})
        deaths_csv = vaccinations_csv = target

    try:
        result = load_all(deaths_csv, vaccinations_csv, strict="--lenient" not in args)
    except (FileNotFoundError, SchemaError, DataLoadError) as e:
        logger.error("Load failed: {}", e)
        sys.exit(1)

    print_validation(result)

    logger.info("Computing report...")
    print_report(location)


if __name__ == "__main__":
    main()
