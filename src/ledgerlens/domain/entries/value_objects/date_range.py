"""Inclusive date range of the active window."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ledgerlens.domain.shared.exceptions import ValidationError
from ledgerlens.domain.shared.time import end_of_day, start_of_day


def format_range_label(first: date, last: date) -> str:
    """Cosmetic label such as ``"Jul 14 - Jul 20, 2025"``."""
    return (
        f"{calendar.month_abbr[first.month]} {first.day} - "
        f"{calendar.month_abbr[last.month]} {last.day}, {last.year}"
    )


@dataclass(frozen=True)
class DateRange:
    """Window from ``start`` (00:00 of its day) to ``end`` (end of its day).

    ``display`` is for humans only and never parsed back.
    """

    start: datetime
    end: datetime
    display: str = ""

    def __post_init__(self):
        if self.start > self.end:
            msg = f"Date range start {self.start} is after end {self.end}"
            raise ValidationError(msg)

    @classmethod
    def from_days(cls, first: date, last: date) -> DateRange:
        return cls(
            start=start_of_day(first),
            end=end_of_day(last),
            display=format_range_label(first, last),
        )

    @property
    def first_day(self) -> date:
        return self.start.date()

    @property
    def last_day(self) -> date:
        return self.end.date()

    def contains(self, moment: datetime) -> bool:
        """Inclusive check against the day-normalized bounds."""
        return (
            start_of_day(self.first_day) <= moment <= end_of_day(self.last_day)
        )

    def contains_day(self, day: date) -> bool:
        return self.first_day <= day <= self.last_day

    def days(self) -> list[date]:
        """Every calendar day of the range, oldest first."""
        count = (self.last_day - self.first_day).days + 1
        return [self.first_day + timedelta(days=i) for i in range(count)]

    def __str__(self) -> str:
        return self.display or format_range_label(self.first_day, self.last_day)
