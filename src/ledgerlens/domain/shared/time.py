"""Time utilities for the domain layer.

All calendar arithmetic works on naive local datetimes: entries are
bucketed by the calendar day the user sees, not by UTC day.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import TypeVar

from ledgerlens.domain.shared.exceptions import InvalidDateError

D = TypeVar("D", date, datetime)


def local_now() -> datetime:
    """Return the current local datetime (naive)."""
    return datetime.now()


def local_today() -> date:
    """Return the current local date."""
    return local_now().date()


def start_of_day(day: date) -> datetime:
    """Return 00:00:00.000000 of the given day."""
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    """Return 23:59:59.999999 of the given day."""
    return datetime.combine(day, time.max)


def last_day_of_month(day: date) -> date:
    """Return the last calendar day of the month containing ``day``."""
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def shift_months(value: D, months: int) -> D:
    """Move ``value`` by a number of calendar months.

    The day of month is clamped to the length of the target month, so
    March 31 minus one month is the last day of February.
    """
    month_index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    max_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, max_day))


def parse_entry_date(value: str) -> datetime:
    """Parse an ISO 8601 entry date into a naive local datetime.

    Date-only strings are taken as local midnight. Timezone-aware values
    are converted to local time before the offset is dropped.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(value)

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidDateError(value) from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
