"""Normalize raw expenses and income into unified entries."""

from __future__ import annotations

import logging
from datetime import date, datetime

from ledgerlens.domain.entries.entities import UnifiedEntry
from ledgerlens.domain.entries.services.category_name_service import (
    clean_category_name,
)
from ledgerlens.domain.entries.services.personal_share_service import (
    PersonalShareService,
)
from ledgerlens.domain.entries.value_objects.raw_entries import (
    AllEntriesResponse,
    RawCategory,
    RawExpense,
    RawIncome,
)
from ledgerlens.domain.shared.exceptions import InvalidDateError
from ledgerlens.domain.shared.time import parse_entry_date

logger = logging.getLogger(__name__)

DEFAULT_EXPENSE_CATEGORY = "Other"
DEFAULT_INCOME_CATEGORY = "Income"
DEFAULT_INCOME_EMOJI = "💰"


def _category_id(category: RawCategory | None) -> str | None:
    if category is None or category.id is None:
        return None
    return str(category.id)


def _parse_or_none(raw: RawExpense | RawIncome, kind: str) -> datetime | None:
    try:
        return parse_entry_date(raw.date)
    except InvalidDateError:
        logger.warning(
            "Dropping %s %s with unparsable date %r",
            kind,
            raw.id,
            raw.date,
        )
        return None


class EntryUnificationService:
    """Build the unified entry list for one viewing context."""

    @staticmethod
    def unify(
        response: AllEntriesResponse | None,
        *,
        is_personal_view: bool = False,
        user_id: int | str | None = None,
        is_group_view: bool = False,
        income_fallback_emoji: str = DEFAULT_INCOME_EMOJI,
    ) -> list[UnifiedEntry]:
        """Expenses first, then income, each in input order.

        A group view leaves out income and expenses that only concern
        their payer. Entries whose date cannot be parsed are dropped.
        """
        if response is None:
            return []

        combined: list[UnifiedEntry] = []

        for expense in response.expenses:
            if is_group_view and (
                expense.is_income or PersonalShareService.is_personal_expense(expense)
            ):
                continue
            entry = EntryUnificationService.from_expense(
                expense,
                is_personal_view=is_personal_view,
                user_id=user_id,
            )
            if entry is not None:
                combined.append(entry)

        if not is_group_view:
            for income in response.income:
                entry = EntryUnificationService.from_income(
                    income,
                    fallback_emoji=income_fallback_emoji,
                )
                if entry is not None:
                    combined.append(entry)

        logger.debug(
            "Unified %d entries from %d expenses and %d income records",
            len(combined),
            len(response.expenses),
            len(response.income),
        )
        return combined

    @staticmethod
    def from_expense(
        expense: RawExpense,
        *,
        is_personal_view: bool = False,
        user_id: int | str | None = None,
    ) -> UnifiedEntry | None:
        occurred_at = _parse_or_none(expense, "expense")
        if occurred_at is None:
            return None

        category_name = (
            expense.category.name if expense.category else ""
        ) or DEFAULT_EXPENSE_CATEGORY
        emoji = (expense.category.emoji if expense.category else None) or (
            clean_category_name(category_name).emoji
        )
        personal = PersonalShareService.resolve(expense, is_personal_view, user_id)

        return UnifiedEntry(
            id=expense.id,
            description=expense.description,
            category=category_name,
            category_id=_category_id(expense.category),
            emoji=emoji,
            date=expense.date,
            occurred_at=occurred_at,
            amount=personal.amount,
            is_income=expense.is_income,
            is_personal_share=personal.is_personal_share,
            original_amount=personal.original_amount,
            user_share=personal.user_share,
        )

    @staticmethod
    def from_income(
        income: RawIncome,
        *,
        fallback_emoji: str = DEFAULT_INCOME_EMOJI,
    ) -> UnifiedEntry | None:
        occurred_at = _parse_or_none(income, "income")
        if occurred_at is None:
            return None

        category_name = (
            income.category.name if income.category else ""
        ) or DEFAULT_INCOME_CATEGORY
        emoji = (
            (income.category.emoji if income.category else None)
            or clean_category_name(category_name).emoji
            or fallback_emoji
        )

        return UnifiedEntry(
            id=income.id,
            description=income.description,
            category=category_name,
            category_id=_category_id(income.category),
            emoji=emoji,
            date=income.date,
            occurred_at=occurred_at,
            amount=income.amount,
            is_income=True,
        )

    @staticmethod
    def earliest_entry_date(response: AllEntriesResponse | None) -> date | None:
        """Calendar day of the oldest parsable expense or income record."""
        if response is None:
            return None

        earliest: date | None = None
        for raw in [*response.expenses, *response.income]:
            try:
                day = parse_entry_date(raw.date).date()
            except InvalidDateError:
                continue
            if earliest is None or day < earliest:
                earliest = day
        return earliest
