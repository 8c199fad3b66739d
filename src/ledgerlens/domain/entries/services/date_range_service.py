"""Week and month window arithmetic with the earliest-entry clamp."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from ledgerlens.domain.entries.value_objects.date_range import DateRange
from ledgerlens.domain.entries.value_objects.view_type import ViewType
from ledgerlens.domain.shared.time import last_day_of_month, local_today, shift_months

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateWindow:
    """Active window plus what navigation it allows."""

    date_range: DateRange
    can_go_back: bool
    earliest_allowed_start: date | None = None


class DateRangeService:
    """Compute inclusive windows for a view type and time offset."""

    @staticmethod
    def week_start(day: date) -> date:
        """Monday on or before ``day``."""
        return day - timedelta(days=day.weekday())

    @staticmethod
    def month_start(day: date) -> date:
        return day.replace(day=1)

    @staticmethod
    def window_start(view_type: ViewType, day: date) -> date:
        if view_type is ViewType.WEEK:
            return DateRangeService.week_start(day)
        return DateRangeService.month_start(day)

    @staticmethod
    def window_end(view_type: ViewType, start: date) -> date:
        if view_type is ViewType.WEEK:
            return start + timedelta(days=6)
        return last_day_of_month(start)

    @staticmethod
    def target_start(view_type: ViewType, time_offset: int, today: date) -> date:
        """Start of the window ``time_offset`` windows away from today's."""
        if view_type is ViewType.WEEK:
            return DateRangeService.week_start(today + timedelta(weeks=time_offset))
        return shift_months(DateRangeService.month_start(today), time_offset)

    @staticmethod
    def earliest_allowed_start(
        view_type: ViewType,
        earliest_date: date | None,
    ) -> date | None:
        if earliest_date is None:
            return None
        return DateRangeService.window_start(view_type, earliest_date)

    @staticmethod
    def calculate(
        view_type: ViewType,
        time_offset: int = 0,
        earliest_date: date | None = None,
        today: date | None = None,
    ) -> DateWindow:
        """Window for ``time_offset`` windows back, never before the oldest entry.

        ``can_go_back`` is false when there are no entries at all, or when
        one more step back would start before the earliest allowed start.
        """
        today = today or local_today()
        earliest_allowed = DateRangeService.earliest_allowed_start(
            view_type,
            earliest_date,
        )

        start = DateRangeService.target_start(view_type, time_offset, today)
        if earliest_allowed is not None and start < earliest_allowed:
            logger.debug(
                "Clamping %s window start %s to %s",
                view_type.value,
                start,
                earliest_allowed,
            )
            start = earliest_allowed
        end = DateRangeService.window_end(view_type, start)

        previous_start = DateRangeService.target_start(
            view_type,
            time_offset - 1,
            today,
        )
        can_go_back = (
            earliest_allowed is not None and previous_start >= earliest_allowed
        )

        return DateWindow(
            date_range=DateRange.from_days(start, end),
            can_go_back=can_go_back,
            earliest_allowed_start=earliest_allowed,
        )
