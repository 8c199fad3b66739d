"""Tests for chart bucketing."""

from datetime import date, datetime
from decimal import Decimal

from ledgerlens.domain.entries.services import (
    ChartAggregationService,
    EntryUnificationService,
)
from ledgerlens.domain.entries.value_objects import (
    BucketFill,
    DateRange,
    FilterOptions,
    ViewType,
)
from tests.factories import make_entry

WEEK = DateRange.from_days(date(2025, 7, 14), date(2025, 7, 20))
JULY = DateRange.from_days(date(2025, 7, 1), date(2025, 7, 31))


class TestWeekChart:
    """Tests for the week chart."""

    def test_empty_week_has_seven_zero_points(self):
        """Test an empty week still has a zero point per weekday."""
        points = ChartAggregationService.aggregate(
            [],
            WEEK,
            ViewType.WEEK,
            today=date(2025, 8, 1),
        )

        assert [p.name for p in points] == [
            "Mon",
            "Tue",
            "Wed",
            "Thu",
            "Fri",
            "Sat",
            "Sun",
        ]
        assert all(p.amount == 0 for p in points)
        assert {p.line_value for p in points} == {Decimal("0")}
        assert all(p.fill is BucketFill.NORMAL for p in points)

    def test_sums_magnitudes_per_day_and_averages(self):
        """Test amounts are summed as magnitudes and averaged over all days."""
        entries = [
            make_entry(id=1, occurred_at=datetime(2025, 7, 14, 9), amount="10"),
            make_entry(id=2, occurred_at=datetime(2025, 7, 14, 19), amount="-4"),
            make_entry(id=3, occurred_at=datetime(2025, 7, 18, 12), amount="7"),
        ]

        points = ChartAggregationService.aggregate(
            entries,
            WEEK,
            ViewType.WEEK,
            today=date(2025, 7, 16),
        )
        by_name = {p.name: p for p in points}

        assert by_name["Mon"].amount == Decimal("14")
        assert by_name["Fri"].amount == Decimal("7")
        assert by_name["Mon"].line_value == Decimal("21") / 7

    def test_highlights_today(self):
        """Test today's bucket is highlighted."""
        points = ChartAggregationService.aggregate(
            [],
            WEEK,
            ViewType.WEEK,
            today=date(2025, 7, 16),
        )

        highlighted = [p.name for p in points if p.is_highlighted]
        assert highlighted == ["Wed"]

    def test_entries_outside_range_are_ignored(self):
        """Test entries outside the window are not counted."""
        entries = [make_entry(occurred_at=datetime(2025, 7, 21, 0, 0), amount="99")]

        points = ChartAggregationService.aggregate(
            entries,
            WEEK,
            ViewType.WEEK,
            today=date(2025, 7, 16),
        )

        assert sum(p.amount for p in points) == 0


class TestMonthChart:
    """Tests for the month chart."""

    def test_july_scenario(self, july_response, july_today):
        """Test the July month chart with one expense and one income."""
        entries = EntryUnificationService.unify(july_response)

        points = ChartAggregationService.aggregate(
            entries,
            JULY,
            ViewType.MONTH,
            today=july_today,
        )
        by_name = {p.name: p.amount for p in points}

        assert len(points) == 31
        assert points[0].name == "1 Jul"
        assert points[-1].name == "31 Jul"
        assert by_name["14 Jul"] == Decimal("15")
        assert by_name["1 Jul"] == Decimal("3000")
        assert sum(by_name.values()) == Decimal("3015")

    def test_july_scenario_without_income(self, july_response, july_today):
        """Test the July month chart limited to expenses."""
        entries = EntryUnificationService.unify(july_response)

        points = ChartAggregationService.aggregate(
            entries,
            JULY,
            ViewType.MONTH,
            options=FilterOptions(show_income=False),
            today=july_today,
        )
        non_zero = {p.name: p.amount for p in points if p.amount}

        assert non_zero == {"14 Jul": Decimal("15")}

    def test_category_option(self):
        """Test the chart can be limited to one category."""
        entries = [
            make_entry(id=1, category="🍔 Food", amount="8"),
            make_entry(id=2, category="Travel", amount="80"),
        ]

        points = ChartAggregationService.aggregate(
            entries,
            JULY,
            ViewType.MONTH,
            options=FilterOptions(category_id="Food"),
            today=date(2025, 7, 16),
        )

        assert sum(p.amount for p in points) == Decimal("8")
