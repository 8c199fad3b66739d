"""Dashboard breakdowns of expenses for today, this week or this month."""

from __future__ import annotations

import calendar
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable, Sequence

from ledgerlens.domain.entries.services.category_name_service import (
    clean_category_name,
)
from ledgerlens.domain.entries.value_objects.breakdown import (
    BreakdownBucket,
    BreakdownPeriod,
    CategorySpending,
    SummaryTotals,
)
from ledgerlens.domain.entries.value_objects.raw_entries import (
    AllEntriesResponse,
    RawBudget,
    RawExpense,
)
from ledgerlens.domain.shared.exceptions import InvalidDateError
from ledgerlens.domain.shared.time import (
    end_of_day,
    last_day_of_month,
    local_today,
    parse_entry_date,
    start_of_day,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_EMOJI = "⚪"


@dataclass(frozen=True)
class _DatedExpense:
    expense: RawExpense
    occurred_at: datetime


def _dated(expenses: Iterable[RawExpense]) -> list[_DatedExpense]:
    dated: list[_DatedExpense] = []
    for expense in expenses:
        try:
            dated.append(_DatedExpense(expense, parse_entry_date(expense.date)))
        except InvalidDateError:
            logger.warning(
                "Skipping expense %s with unparsable date %r",
                expense.id,
                expense.date,
            )
    return dated


def _week_of_month(day: int) -> int:
    return math.ceil(day / 7)


class PeriodBreakdownService:
    """Hourly, weekday and week-of-month spending for the dashboard.

    Only non-income expenses count; income booked through the expense
    log is left out everywhere.
    """

    @staticmethod
    def period_start(period: BreakdownPeriod, today: date) -> datetime:
        if period is BreakdownPeriod.DAILY:
            return start_of_day(today)
        if period is BreakdownPeriod.WEEKLY:
            return start_of_day(today - timedelta(days=7))
        return start_of_day(today.replace(day=1))

    @staticmethod
    def period_end(period: BreakdownPeriod, today: date) -> datetime:
        if period is BreakdownPeriod.DAILY:
            return end_of_day(today)
        if period is BreakdownPeriod.WEEKLY:
            return end_of_day(today + timedelta(days=6 - today.weekday()))
        return end_of_day(last_day_of_month(today))

    @staticmethod
    def period_expenses(
        expenses: Iterable[RawExpense],
        period: BreakdownPeriod,
        today: date | None = None,
    ) -> list[RawExpense]:
        """Non-income expenses dated within ``period``.

        The period runs from its start up to the end of today (daily),
        the end of this Sunday (weekly) or the end of this month
        (monthly); later entries belong to a future period.
        """
        today = today or local_today()
        since = PeriodBreakdownService.period_start(period, today)
        until = PeriodBreakdownService.period_end(period, today)
        return [
            item.expense
            for item in _dated(expenses)
            if not item.expense.is_income and since <= item.occurred_at <= until
        ]

    @staticmethod
    def breakdown(
        expenses: Iterable[RawExpense],
        period: BreakdownPeriod,
        today: date | None = None,
    ) -> list[BreakdownBucket]:
        today = today or local_today()
        selected = _dated(
            PeriodBreakdownService.period_expenses(expenses, period, today)
        )

        if period is BreakdownPeriod.DAILY:
            hours = [Decimal("0")] * 24
            for item in selected:
                hours[item.occurred_at.hour] += abs(item.expense.amount)
            return [
                BreakdownBucket(label=f"{hour}:00", amount=amount)
                for hour, amount in enumerate(hours)
            ]

        if period is BreakdownPeriod.WEEKLY:
            # The period reaches back seven days; the chart shows Mon..Sun only
            monday = today - timedelta(days=today.weekday())
            first, last = start_of_day(monday), end_of_day(monday + timedelta(days=6))
            weekdays = [Decimal("0")] * 7
            for item in selected:
                if first <= item.occurred_at <= last:
                    weekdays[item.occurred_at.weekday()] += abs(item.expense.amount)
            return [
                BreakdownBucket(label=calendar.day_abbr[index], amount=amount)
                for index, amount in enumerate(weekdays)
            ]

        weeks = [Decimal("0")] * _week_of_month(last_day_of_month(today).day)
        for item in selected:
            weeks[_week_of_month(item.occurred_at.day) - 1] += abs(item.expense.amount)
        return [
            BreakdownBucket(label=f"Week {index + 1}", amount=amount)
            for index, amount in enumerate(weeks)
        ]

    @staticmethod
    def category_breakdown(
        expenses: Iterable[RawExpense],
        budgets: Sequence[RawBudget],
        period: BreakdownPeriod,
        today: date | None = None,
    ) -> list[CategorySpending]:
        """Spending per cleaned category, budgeted categories always listed.

        Sorted by amount spent, largest first; ties keep budget order.
        """
        spent: dict[str, Decimal] = {}
        emojis: dict[str, str] = {}
        budgeted: dict[str, Decimal] = {}

        for budget in budgets:
            raw_name = budget.category.name if budget.category else ""
            cleaned = clean_category_name(raw_name)
            budgeted[cleaned.name] = (
                budgeted.get(cleaned.name, Decimal("0")) + budget.amount
            )
            spent.setdefault(cleaned.name, Decimal("0"))
            category_emoji = budget.category.emoji if budget.category else None
            emoji = category_emoji or cleaned.emoji
            if emoji:
                emojis.setdefault(cleaned.name, emoji)

        for expense in PeriodBreakdownService.period_expenses(expenses, period, today):
            raw_name = expense.category.name if expense.category else ""
            cleaned = clean_category_name(raw_name)
            spent[cleaned.name] = (
                spent.get(cleaned.name, Decimal("0")) + abs(expense.amount)
            )
            category_emoji = expense.category.emoji if expense.category else None
            emoji = category_emoji or cleaned.emoji
            if emoji:
                emojis.setdefault(cleaned.name, emoji)

        categories = [
            CategorySpending(
                name=name,
                emoji=emojis.get(name, DEFAULT_CATEGORY_EMOJI),
                spent=amount,
                budget=budgeted.get(name, Decimal("0")),
            )
            for name, amount in spent.items()
        ]
        return sorted(categories, key=lambda c: c.spent, reverse=True)

    @staticmethod
    def summary(response: AllEntriesResponse) -> SummaryTotals:
        """Totals over the whole response, independent of any period."""
        return SummaryTotals(
            total_income=sum((i.amount for i in response.income), Decimal("0")),
            total_expenses=sum(
                (abs(e.amount) for e in response.expenses if not e.is_income),
                Decimal("0"),
            ),
            total_budget=sum((b.amount for b in response.budgets), Decimal("0")),
        )
