"""Pure math formulas - no dependencies, easily testable."""


def percentage(part: float | None, whole: float | None) -> float | None:
    """part / whole * 100, None when undefined."""
    if part is None or whole is None or whole == 0:
        return None
    return part / whole * 100


def round_or_none(value: float | None, ndigits: int = 2) -> float | None:
    """Round, passing missing values through."""
    return None if value is None else round(value, ndigits)
