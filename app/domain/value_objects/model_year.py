"""Model year value object."""

from dataclasses import dataclass
from datetime import datetime, timezone

MIN_MODEL_YEAR = 1900


def current_year() -> int:
    """Get the current calendar year (UTC)."""
    return datetime.now(timezone.utc).year


@dataclass(frozen=True)
class ModelYear:
    """Model year value object."""

    year: int

    def __post_init__(self) -> None:
        """Validate model year."""
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise ValueError("Model year must be an integer")
        latest = current_year()
        if self.year < MIN_MODEL_YEAR or self.year > latest:
            raise ValueError(f"Model year must be between {MIN_MODEL_YEAR} and {latest}")
