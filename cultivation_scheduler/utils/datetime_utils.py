"""Date and time utilities."""

import math
from datetime import date, datetime, time, timedelta

from ..errors import ValidationError


def parse_start_date(start_date: str, day_start_hour: int = 6) -> datetime:
    """Parse an ISO date (YYYY-MM-DD) into the first working instant of that day."""
    try:
        day = date.fromisoformat(start_date)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid start date: {start_date!r}") from e
    return datetime.combine(day, time(hour=day_start_hour))


def add_hours(moment: datetime, hours: float) -> datetime:
    """Return ``moment`` shifted forward by a (possibly fractional) number of hours."""
    return moment + timedelta(hours=hours)


def span_days(start: datetime, end: datetime) -> float:
    """Length of the interval in fractional days."""
    return (end - start).total_seconds() / (24 * 3600)


def ceil_days(start: datetime, end: datetime) -> int:
    """Number of calendar days the interval covers, rounded up."""
    return int(math.ceil(span_days(start, end)))
