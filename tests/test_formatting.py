"""Tests for display formatting."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from water_intake.api.formatting import format_amount, format_timestamp


def test_format_amount_one_decimal() -> None:
    assert format_amount(8) == "8.0 oz"
    assert format_amount(12.34) == "12.3 oz"


def test_format_timestamp_medium_date_short_time() -> None:
    utc = ZoneInfo("UTC")

    assert (
        format_timestamp(datetime(2024, 1, 1, 9, 5, tzinfo=UTC), utc)
        == "Jan 1, 2024 at 9:05 AM"
    )
    assert (
        format_timestamp(datetime(2024, 1, 1, 0, 30, tzinfo=UTC), utc)
        == "Jan 1, 2024 at 12:30 AM"
    )


def test_format_timestamp_uses_display_timezone() -> None:
    timestamp = datetime(2024, 3, 2, 3, 15, tzinfo=UTC)

    assert (
        format_timestamp(timestamp, ZoneInfo("America/Los_Angeles"))
        == "Mar 1, 2024 at 7:15 PM"
    )
