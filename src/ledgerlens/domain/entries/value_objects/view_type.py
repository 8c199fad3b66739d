"""Granularity of the list and chart windows."""

from __future__ import annotations

import calendar
from datetime import date
from enum import Enum

from ledgerlens.domain.shared.exceptions import ErrorCode, ValidationError


class ViewType(str, Enum):
    """Window granularity; a week runs Monday to Sunday."""

    WEEK = "Week"
    MONTH = "Month"

    @classmethod
    def parse(cls, value: str | ViewType) -> ViewType:
        """Parse 'week', 'Week', 'MONTH' and friends."""
        if isinstance(value, ViewType):
            return value
        if isinstance(value, str):
            normalized = value.strip().capitalize()
            for member in cls:
                if member.value == normalized:
                    return member

        msg = f"Unknown view type: {value!r}"
        raise ValidationError(
            msg,
            ErrorCode.INVALID_VIEW_TYPE,
            {"value": value},
        )

    def bucket_label(self, day: date) -> str:
        """Label of the chart bucket a day falls into.

        Weekday short name for weeks ("Mon"), "<day> <month>" for
        months ("14 Jul").
        """
        if self is ViewType.WEEK:
            return calendar.day_abbr[day.weekday()]
        return f"{day.day} {calendar.month_abbr[day.month]}"
