"""Domain models for water intake."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class TimeRange(StrEnum):
    """Selectable trend range."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def bucket_count(self) -> int:
        """Number of daily buckets charted for the range."""
        return _BUCKET_COUNTS[self]


_BUCKET_COUNTS = {
    TimeRange.DAY: 1,
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
    TimeRange.YEAR: 365,
}


@dataclass(frozen=True)
class IntakeRecord:
    """A single logged amount of water, in ounces."""

    timestamp: datetime
    amount: float

    def __post_init__(self) -> None:
        if self.timestamp.tzinfo is None or self.timestamp.utcoffset() is None:
            raise ValueError("Intake timestamp must be timezone-aware")


@dataclass(frozen=True)
class IntakeBucket:
    """Total intake for one calendar day."""

    day: date
    amount: float
