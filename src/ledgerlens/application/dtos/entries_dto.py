"""Entry list, chart and dashboard DTOs.

Shaped for the presentation layer: everything a table or chart needs
for one render, already filtered, sorted and totalled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ledgerlens.domain.entries.entities import UnifiedEntry
from ledgerlens.domain.entries.services.date_range_service import DateWindow
from ledgerlens.domain.entries.value_objects import (
    BreakdownBucket,
    CategoryLabel,
    CategorySpending,
    ChartDataPoint,
    FilterStats,
    SummaryTotals,
)


@dataclass(frozen=True)
class ViewingContext:
    """Whose money the entries are shown for.

    A group view lists the shared expenses of a group chat; a personal
    view replaces split expenses by the viewer's share.
    """

    is_personal_view: bool = False
    user_id: int | str | None = None
    is_group_view: bool = False


@dataclass
class EntryListResult:
    """Filtered list for the active window or search."""

    entries: list[UnifiedEntry]
    window: DateWindow
    stats: FilterStats
    categories: list[CategoryLabel] = field(default_factory=list)


@dataclass
class ChartResult:
    """Gap-free chart series for one window."""

    points: list[ChartDataPoint]
    window: DateWindow

    @property
    def total(self) -> Decimal:
        return sum((p.amount for p in self.points), Decimal("0"))

    @property
    def line_value(self) -> Decimal:
        return self.points[0].line_value if self.points else Decimal("0")


@dataclass
class DashboardData:
    """Spending overview for today, this week or this month."""

    period_label: str
    total_expenses: Decimal
    breakdown: list[BreakdownBucket]
    categories: list[CategorySpending]
    num_of_budgets: int
    summary: SummaryTotals
