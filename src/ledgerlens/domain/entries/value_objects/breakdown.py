"""Value objects for dashboard breakdowns and list statistics."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BreakdownPeriod(str, Enum):
    """Dashboard period selector."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def label(self) -> str:
        return {
            BreakdownPeriod.DAILY: "Today",
            BreakdownPeriod.WEEKLY: "This Week",
            BreakdownPeriod.MONTHLY: "This Month",
        }[self]


@dataclass(frozen=True)
class BreakdownBucket:
    """Spending within one hour, weekday or week of the month."""

    label: str
    amount: Decimal


@dataclass(frozen=True)
class CategorySpending:
    """Spending of one cleaned category against its budget."""

    name: str
    emoji: str
    spent: Decimal
    budget: Decimal = Decimal("0")

    @property
    def remaining(self) -> Decimal:
        return self.budget - self.spent


@dataclass(frozen=True)
class SummaryTotals:
    """Headline totals of an entries response."""

    total_income: Decimal
    total_expenses: Decimal
    total_budget: Decimal


@dataclass(frozen=True)
class FilterStats:
    """Counts and magnitude of a filtered entry list."""

    total: int
    total_amount: Decimal
    expense_count: int
    income_count: int


@dataclass(frozen=True)
class CategoryLabel:
    """A distinct category as shown in the category filter."""

    name: str
    raw_name: str
