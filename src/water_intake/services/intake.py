"""Water intake logging service."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from water_intake.domain.intake import IntakeBucket, IntakeRecord, TimeRange
from water_intake.services.aggregation import (
    compute_buckets,
    compute_series,
    range_start,
)

DEFAULT_MAX_AMOUNT = 100.0

_logger = logging.getLogger(__name__)


class InvalidAmountError(ValueError):
    """Raised when an intake amount is outside the accepted range."""


class RecordStore(Protocol):
    """Storage interface for intake records."""

    def append(self, record: IntakeRecord) -> None:
        """Add a record to the store."""

    def all(self) -> list[IntakeRecord]:
        """Return a snapshot of all records in insertion order."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class IntakeService:
    """Service for logging water and charting consumption by timezone."""

    store: RecordStore
    timezone: ZoneInfo = field(default_factory=lambda: ZoneInfo("UTC"))
    max_amount: float = DEFAULT_MAX_AMOUNT
    clock: Callable[[], datetime] = _utc_now

    def add_water(self, amount: float) -> IntakeRecord:
        """Validate and log an amount of water at the current time."""
        if not math.isfinite(amount) or amount < 0 or amount > self.max_amount:
            _logger.warning("Rejected intake amount: amount=%s", amount)
            raise InvalidAmountError(
                f"Amount must be between 0 and {self.max_amount:g} oz"
            )
        record = IntakeRecord(timestamp=self.clock(), amount=amount)
        self.store.append(record)
        _logger.info("Water intake logged: amount=%.1f", amount)
        return record

    def total_consumed(self) -> float:
        """Return the total amount of water logged."""
        return sum((record.amount for record in self.store.all()), 0.0)

    def has_data(self) -> bool:
        """Return True when any intake has been logged."""
        return bool(self.store.all())

    def history(self, time_range: TimeRange | None = None) -> list[IntakeRecord]:
        """Return logged records, optionally limited to a range window."""
        records = self.store.all()
        if time_range is None:
            return records
        now = self._now()
        start = range_start(time_range, now)
        return [record for record in records if start <= record.timestamp <= now]

    def buckets(self, time_range: TimeRange) -> list[IntakeBucket]:
        """Return labelled daily totals for a range."""
        return compute_buckets(self.store.all(), time_range, self._now())

    def series(self, time_range: TimeRange) -> list[float]:
        """Return daily totals for a range, oldest first."""
        return compute_series(self.store.all(), time_range, self._now())

    def _now(self) -> datetime:
        return self.clock().astimezone(self.timezone)
