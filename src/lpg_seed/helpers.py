"""
Date helpers shared by the generators.

Contains:
- utc_now(): Timezone-aware current time
- shift_months(): Calendar month arithmetic with day clamping
- as_datetime(): Normalize values read back from a store
"""

import calendar
from datetime import date, datetime, time, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def shift_months(value: datetime, months: int) -> datetime:
    """
    Move a timestamp by whole calendar months.

    The day is clamped to the target month's length, so Mar 31 minus one
    month is Feb 28 (or 29).

    Args:
        value: Timestamp to shift
        months: Months to add (negative for the past)
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def as_datetime(value: datetime | date | str | None) -> datetime | None:
    """
    Coerce a stored timestamp to an aware datetime.

    Rows fetched from a store may hold datetimes, dates or ISO strings
    depending on the driver and column type. Naive values are taken as UTC.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    elif not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value
