"""Base entity class for all result entities."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    @classmethod
    def from_rows(cls, rows: list[dict[str, Any]]) -> list:
        """Build entities from row dicts, ignoring unknown keys."""
        names = cls.__dataclass_fields__.keys()
        return [cls(**{k: r.get(k) for k in names}) for r in rows]
