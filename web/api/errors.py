"""API errors and validation helpers."""

from app.container import container


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


MAX_PATTERN_LENGTH = 100


def validate_location(location: str) -> None:
    """Validate location exists in the dataset."""
    if location not in container.deaths.get_locations(countries_only=False):
        raise NotFoundError(f"Unknown location: {location}")


def validate_pattern(pattern: str | None) -> None:
    """Validate a location search pattern."""
    if pattern is None:
        return
    if not pattern.strip():
        raise ValidationError("Location pattern must not be blank")
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise ValidationError(f"Location pattern longer than {MAX_PATTERN_LENGTH} characters")
