"""Load errors with row references."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RowIssue:
    """One unparseable value in a CSV file, or a whole unreadable row (column is None)."""

    line: int
    column: str | None
    value: str | None
    reason: str | None = None

    def __str__(self) -> str:
        if self.column is None:
            return f"line {self.line}: {self.reason}"
        return f"line {self.line}, column {self.column!r}: {self.value!r}"


class SchemaError(Exception):
    """CSV file is missing required columns."""

    def __init__(self, path: Path, missing: list[str]):
        self.path = path
        self.missing = missing
        self.message = f"{path}: missing required columns {', '.join(missing)}"
        super().__init__(self.message)


class DataLoadError(Exception):
    """CSV file has malformed rows."""

    MAX_LISTED = 10

    def __init__(self, path: Path, issues: list[RowIssue]):
        self.path = path
        self.issues = issues
        listed = "; ".join(str(i) for i in issues[: self.MAX_LISTED])
        more = f" (+{len(issues) - self.MAX_LISTED} more)" if len(issues) > self.MAX_LISTED else ""
        self.message = f"{path}: {len(issues)} malformed values: {listed}{more}"
        super().__init__(self.message)
