"""Tests for week and month window arithmetic."""

from datetime import date, datetime, time, timedelta

import pytest

from ledgerlens.domain.entries.services import DateRangeService
from ledgerlens.domain.entries.value_objects import ViewType


class TestWeekWindow:
    """Weeks run Monday to Sunday."""

    def test_current_week(self):
        """Test the current week runs Monday to Sunday around today."""
        window = DateRangeService.calculate(ViewType.WEEK, 0, today=date(2025, 7, 16))

        assert window.date_range.first_day == date(2025, 7, 14)
        assert window.date_range.last_day == date(2025, 7, 20)
        assert window.date_range.display == "Jul 14 - Jul 20, 2025"

    def test_sunday_belongs_to_the_week_before(self):
        """Test a Sunday belongs to the week that started the Monday before."""
        window = DateRangeService.calculate(ViewType.WEEK, 0, today=date(2025, 7, 20))

        assert window.date_range.first_day == date(2025, 7, 14)

    def test_previous_week(self):
        """Test an offset of -1 moves back one full week."""
        window = DateRangeService.calculate(ViewType.WEEK, -1, today=date(2025, 7, 16))

        assert window.date_range.first_day == date(2025, 7, 7)
        assert window.date_range.last_day == date(2025, 7, 13)

    @pytest.mark.parametrize("offset", [0, -1, -5, -30])
    def test_week_spans_six_days(self, offset):
        """Test every week window spans Monday to Sunday."""
        window = DateRangeService.calculate(
            ViewType.WEEK,
            offset,
            today=date(2025, 7, 16),
        )

        span = window.date_range.last_day - window.date_range.first_day
        assert span.days == 6
        assert window.date_range.first_day.weekday() == 0

    def test_bounds_are_normalized_to_whole_days(self):
        """Test the window bounds are start and end of day."""
        window = DateRangeService.calculate(ViewType.WEEK, 0, today=date(2025, 7, 16))

        assert window.date_range.start == datetime(2025, 7, 14, 0, 0)
        assert window.date_range.end == datetime.combine(date(2025, 7, 20), time.max)

    def test_display_across_years(self):
        """Test the label of a week spanning New Year."""
        window = DateRangeService.calculate(ViewType.WEEK, 0, today=date(2025, 1, 1))

        assert window.date_range.display == "Dec 30 - Jan 5, 2025"


class TestMonthWindow:
    """Tests for month windows."""

    def test_current_month(self):
        """Test the current month runs from the 1st to the last day."""
        window = DateRangeService.calculate(ViewType.MONTH, 0, today=date(2025, 7, 16))

        assert window.date_range.first_day == date(2025, 7, 1)
        assert window.date_range.last_day == date(2025, 7, 31)

    def test_previous_month_from_month_end(self):
        """Moving back from the 31st never skips a short month."""
        window = DateRangeService.calculate(
            ViewType.MONTH,
            -1,
            today=date(2025, 3, 31),
        )

        assert window.date_range.first_day == date(2025, 2, 1)
        assert window.date_range.last_day == date(2025, 2, 28)

    def test_leap_february(self):
        """Test February of a leap year ends on the 29th."""
        window = DateRangeService.calculate(
            ViewType.MONTH,
            -1,
            today=date(2024, 3, 5),
        )

        assert window.date_range.last_day == date(2024, 2, 29)

    @pytest.mark.parametrize("offset", [0, -1, -2, -11, -12, -13])
    def test_month_ends_on_its_last_day(self, offset):
        """Test every month window ends on that month's last day."""
        window = DateRangeService.calculate(
            ViewType.MONTH,
            offset,
            today=date(2025, 7, 16),
        )
        last = window.date_range.last_day

        assert window.date_range.first_day.day == 1
        assert (last + timedelta(days=1)).day == 1


class TestEarliestDateClamp:
    """Windows never start before the oldest entry's window."""

    def test_week_start_never_before_monday_of_oldest_week(self):
        """Test no week window starts before the oldest entry's Monday."""
        earliest = date(2024, 3, 15)

        for offset in range(0, -80, -1):
            window = DateRangeService.calculate(
                ViewType.WEEK,
                offset,
                earliest_date=earliest,
                today=date(2024, 6, 1),
            )
            assert window.date_range.first_day >= date(2024, 3, 11)

    def test_window_before_oldest_is_snapped(self):
        """Test a window before the oldest entry is snapped forward."""
        window = DateRangeService.calculate(
            ViewType.WEEK,
            -50,
            earliest_date=date(2024, 3, 15),
            today=date(2024, 6, 1),
        )

        assert window.date_range.first_day == date(2024, 3, 11)
        assert window.date_range.last_day == date(2024, 3, 17)
        assert window.earliest_allowed_start == date(2024, 3, 11)
        assert window.can_go_back is False

    def test_month_is_snapped_to_first_of_oldest_month(self):
        """Test month windows are snapped to the oldest entry's month."""
        window = DateRangeService.calculate(
            ViewType.MONTH,
            -10,
            earliest_date=date(2024, 3, 15),
            today=date(2024, 6, 1),
        )

        assert window.date_range.first_day == date(2024, 3, 1)
        assert window.date_range.last_day == date(2024, 3, 31)

    def test_can_go_back_while_previous_window_is_allowed(self):
        """Test going back is allowed while the previous window is in range."""
        window = DateRangeService.calculate(
            ViewType.MONTH,
            0,
            earliest_date=date(2025, 6, 20),
            today=date(2025, 7, 16),
        )

        assert window.can_go_back is True

    def test_cannot_go_back_from_oldest_window(self):
        """Test going back is refused from the oldest window."""
        window = DateRangeService.calculate(
            ViewType.MONTH,
            -1,
            earliest_date=date(2025, 6, 20),
            today=date(2025, 7, 16),
        )

        assert window.date_range.first_day == date(2025, 6, 1)
        assert window.can_go_back is False

    def test_no_entries_means_no_going_back(self):
        """Test going back is refused when there are no entries."""
        window = DateRangeService.calculate(ViewType.WEEK, 0, today=date(2025, 7, 16))

        assert window.can_go_back is False
        assert window.earliest_allowed_start is None
