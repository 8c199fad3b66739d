"""Dashboard overview - period totals, breakdown and budgets.

Works on the raw expenses rather than unified entries: income is never
part of the period figures, only of the summary totals.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from ledgerlens.application.dtos import DashboardData
from ledgerlens.application.queries.base import EntriesQuery
from ledgerlens.domain.entries.services import (
    PeriodBreakdownService,
    PersonalShareService,
)
from ledgerlens.domain.entries.value_objects import BreakdownPeriod, RawExpense
from ledgerlens.domain.shared.time import local_today

FLEXIBLE_BUDGET_MARKER = "flexible"


class DashboardQuery(EntriesQuery):
    """Query to generate dashboard data for one period."""

    def _expenses(self) -> list[RawExpense]:
        if self._context.is_personal_view:
            return PersonalShareService.personal_expenses_from_group(
                self._response.expenses,
                self._context.user_id,
            )
        return list(self._response.expenses)

    def _num_of_budgets(self) -> int:
        return sum(
            1
            for budget in self._response.budgets
            if FLEXIBLE_BUDGET_MARKER
            not in (budget.category.name if budget.category else "").lower()
        )

    def execute(
        self,
        period: BreakdownPeriod = BreakdownPeriod.MONTHLY,
        today: date | None = None,
    ) -> DashboardData:
        today = today or local_today()
        return self._cached(
            "dashboard", (period, today), lambda: self._build(period, today)
        )

    def _build(self, period: BreakdownPeriod, today: date) -> DashboardData:
        expenses = self._expenses()
        period_expenses = PeriodBreakdownService.period_expenses(
            expenses,
            period,
            today,
        )
        return DashboardData(
            period_label=period.label,
            total_expenses=sum(
                (abs(e.amount) for e in period_expenses),
                Decimal("0"),
            ),
            breakdown=PeriodBreakdownService.breakdown(expenses, period, today),
            categories=PeriodBreakdownService.category_breakdown(
                expenses,
                self._response.budgets,
                period,
                today,
            ),
            num_of_budgets=self._num_of_budgets(),
            summary=PeriodBreakdownService.summary(self._response),
        )
