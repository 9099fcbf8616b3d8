"""CSV loading - parse text columns into typed polars frames."""

from pathlib import Path

import polars as pl
from loguru import logger

from app.models.covid import DEATHS_COLUMNS, VACCINATIONS_COLUMNS
from etl.errors import DataLoadError, RowIssue, SchemaError
from settings import DATE_FORMAT

# Header is line 1
FIRST_DATA_LINE = 2

KEY_COLUMNS = ["location", "date"]
TEXT_COLUMNS = ["location", "continent"]

# A quoted field may hold commas; "" inside it is an escaped quote
QUOTED_FIELD = r'"(?:[^"]|"")*"'


def _field_count(text: pl.Expr) -> pl.Expr:
    """Number of comma-separated fields in a raw CSV line."""
    return text.str.replace_all(QUOTED_FIELD, "").str.count_matches(",", literal=True) + 1


def _decode(raw_lines: list[bytes]) -> tuple[pl.DataFrame, list[RowIssue]]:
    """Numbered non-blank data lines, plus an issue for every line that is not UTF-8."""
    numbers, texts, issues = [], [], []
    for number, raw in enumerate(raw_lines, start=FIRST_DATA_LINE):
        if not raw.strip():
            continue
        try:
            texts.append(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            issues.append(RowIssue(number, None, None, f"invalid UTF-8 at byte {e.start}"))
            continue
        numbers.append(number)
    lines = pl.DataFrame({"line": numbers, "text": texts}, schema={"line": pl.Int64, "text": pl.String})
    return lines, issues


def _read_text(path: Path, columns: list[str]) -> tuple[pl.DataFrame, list[RowIssue]]:
    """Read the wanted columns as text, with CSV line numbers.

    Rows that cannot be split into the header's fields (wrong field count,
    unbalanced quotes, bad encoding) are returned as issues, not as data.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")

    raw_lines = path.read_bytes().splitlines()
    if not raw_lines:
        raise SchemaError(path, columns)

    header = raw_lines[0].decode("utf-8-sig", errors="replace")
    expected = pl.DataFrame({"text": [header]}).select(_field_count(pl.col("text"))).item()

    lines, issues = _decode(raw_lines[1:])
    lines = lines.with_columns(
        _field_count(pl.col("text")).alias("fields"),
        (pl.col("text").str.count_matches('"', literal=True) % 2 == 1).alias("unbalanced"),
    )
    for line, _, fields, unbalanced in lines.filter(
        (pl.col("fields") != expected) | pl.col("unbalanced")
    ).iter_rows():
        reason = "unbalanced quotes" if unbalanced else f"expected {expected} fields, found {fields}"
        issues.append(RowIssue(line, None, None, reason))
    lines = lines.filter((pl.col("fields") == expected) & ~pl.col("unbalanced"))

    df = pl.read_csv("\n".join([header, *lines["text"].to_list()]).encode(), infer_schema=False)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise SchemaError(path, missing)

    df = df.select(
        [
            pl.when(pl.col(c).str.strip_chars() == "").then(None).otherwise(pl.col(c).str.strip_chars()).alias(c)
            for c in columns
        ]
    ).with_columns(lines["line"])
    return df, issues


def _count(raw: pl.Expr) -> pl.Expr:
    """Integer value of a count field: "12" and "12.0" parse, "12.5" does not."""
    as_float = raw.cast(pl.Float64, strict=False)
    whole = pl.when(as_float.is_finite() & (as_float == as_float.floor())).then(as_float)
    return pl.coalesce(raw.cast(pl.Int64, strict=False), whole.cast(pl.Int64, strict=False))


def _parsed(column: str) -> pl.Expr:
    """Typed value of a text column (null when unparseable)."""
    raw = pl.col(column)
    if column == "date":
        return raw.str.to_date(DATE_FORMAT, strict=False).alias(column)
    if column in TEXT_COLUMNS:
        return raw
    return _count(raw).alias(column)


def _valid(column: str) -> pl.Expr:
    """True where the raw value is acceptable for the column."""
    value = _parsed(column)
    if column in KEY_COLUMNS:
        return value.is_not_null()
    if column in TEXT_COLUMNS:
        return pl.lit(True)
    # Counts: empty or a whole number
    return pl.col(column).is_null() | value.is_not_null()


def _issues(df: pl.DataFrame, columns: list[str]) -> list[RowIssue]:
    frames = [
        df.filter(~_valid(c)).select(
            pl.col("line"),
            pl.lit(c).alias("column"),
            pl.col(c).alias("value"),
        )
        for c in columns
    ]
    bad = pl.concat(frames).sort(["line", "column"])
    return [RowIssue(line=r[0], column=r[1], value=r[2]) for r in bad.iter_rows()]


def _load(path: Path, columns: list[str], strict: bool) -> pl.DataFrame:
    df, unreadable = _read_text(path, columns)
    issues = sorted(unreadable + _issues(df, columns), key=lambda i: (i.line, i.column or ""))

    if issues:
        if strict:
            raise DataLoadError(path, issues)
        bad_lines = sorted({i.line for i in issues})
        for issue in issues:
            logger.warning("Skipping {} {}", path, issue)
        df = df.filter(~pl.col("line").is_in(bad_lines))
        logger.warning("{}: dropped {} malformed rows", path, len(bad_lines))

    typed = df.select([_parsed(c) for c in columns])
    logger.info("Loaded {}: {} rows", path, typed.height)
    return typed


def load_deaths_csv(path: Path, strict: bool = True) -> pl.DataFrame:
    """Parse a deaths CSV. Extra columns are ignored."""
    return _load(path, DEATHS_COLUMNS, strict)


def load_vaccinations_csv(path: Path, strict: bool = True) -> pl.DataFrame:
    """Parse a vaccinations CSV. Extra columns are ignored."""
    return _load(path, VACCINATIONS_COLUMNS, strict)
