"""Daily bucketing of intake records for trend charts."""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from water_intake.domain.intake import IntakeBucket, IntakeRecord, TimeRange


def range_start(time_range: TimeRange, now: datetime) -> datetime:
    """Return the instant a range starts at, relative to ``now``.

    The day range is aligned to local midnight; week, month and year are
    rolling and subtract from ``now`` to the instant. Calendar months and
    years are clamped to the end of shorter months.
    """
    if time_range == TimeRange.DAY:
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if time_range == TimeRange.WEEK:
        return now - timedelta(weeks=1)
    if time_range == TimeRange.MONTH:
        return now - relativedelta(months=1)
    return now - relativedelta(years=1)


def compute_buckets(
    records: Iterable[IntakeRecord], time_range: TimeRange, now: datetime
) -> list[IntakeBucket]:
    """Sum records per calendar day over the days ending today.

    ``now`` must be timezone-aware and its timezone defines the calendar:
    every record is converted into it before its day is taken. The result
    always holds ``time_range.bucket_count`` buckets, oldest first, with the
    last bucket being the calendar day of ``now``.
    """
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("Reference time must be timezone-aware")
    tz = now.tzinfo
    today = now.date()

    totals: dict[date, float] = defaultdict(float)
    for record in records:
        totals[record.timestamp.astimezone(tz).date()] += record.amount

    buckets = []
    for offset in range(time_range.bucket_count):
        day = today - timedelta(days=offset)
        buckets.insert(0, IntakeBucket(day=day, amount=totals.get(day, 0.0)))
    return buckets


def compute_series(
    records: Iterable[IntakeRecord], time_range: TimeRange, now: datetime
) -> list[float]:
    """Return per-day totals for the range, oldest first."""
    return [bucket.amount for bucket in compute_buckets(records, time_range, now)]
