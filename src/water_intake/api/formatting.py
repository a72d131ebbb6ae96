"""Display formatting for intake amounts and timestamps."""

from datetime import datetime
from zoneinfo import ZoneInfo

UNIT_SUFFIX = "oz"
NOON = 12


def format_amount(amount: float) -> str:
    """Format an amount with one decimal place and the unit suffix."""
    return f"{amount:.1f} {UNIT_SUFFIX}"


def format_timestamp(timestamp: datetime, tz: ZoneInfo) -> str:
    """Format a timestamp as a medium date with a short time."""
    local = timestamp.astimezone(tz)
    hour = local.hour % NOON or NOON
    meridiem = "AM" if local.hour < NOON else "PM"
    return (
        f"{local:%b} {local.day}, {local.year} at "
        f"{hour}:{local.minute:02d} {meridiem}"
    )
