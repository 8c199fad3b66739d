"""Personal share resolution for split group expenses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable

from ledgerlens.domain.entries.value_objects.raw_entries import (
    ExpenseShare,
    RawExpense,
)

logger = logging.getLogger(__name__)


def coerce_user_id(value: Any) -> int | None:
    """Normalize a user id given as int or numeric string.

    Returns None for anything that is not a whole number, so a
    non-numeric id never matches.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class PersonalShare:
    """Amount attributable to the viewer for one expense."""

    amount: Decimal
    is_personal_share: bool
    original_amount: Decimal
    user_share: ExpenseShare | None = None


class PersonalShareService:
    """Resolve the viewer's part of split expenses."""

    @staticmethod
    def find_share(
        shares: Iterable[ExpenseShare],
        user_id: int | str | None,
    ) -> ExpenseShare | None:
        wanted = coerce_user_id(user_id)
        if wanted is None:
            return None
        for share in shares:
            if coerce_user_id(share.user_id) == wanted:
                return share
        return None

    @staticmethod
    def resolve(
        expense: RawExpense,
        is_personal_view: bool,
        user_id: int | str | None,
    ) -> PersonalShare:
        """Return the viewer's share, or the full amount when there is none."""
        full = PersonalShare(
            amount=expense.amount,
            is_personal_share=False,
            original_amount=expense.amount,
        )
        if not is_personal_view or not expense.shares or user_id in (None, ""):
            return full

        share = PersonalShareService.find_share(expense.shares, user_id)
        if share is None:
            return full

        return PersonalShare(
            amount=share.share_amount,
            is_personal_share=True,
            original_amount=expense.amount,
            user_share=share,
        )

    @staticmethod
    def is_personal_expense(expense: RawExpense) -> bool:
        """True when the payer is the only participant of the expense."""
        if not expense.shares or len(expense.shares) != 1:
            return False
        payer_id = coerce_user_id(expense.payer_id)
        return payer_id is not None and (
            coerce_user_id(expense.shares[0].user_id) == payer_id
        )

    @staticmethod
    def personal_expenses_from_group(
        expenses: Iterable[RawExpense],
        user_id: int | str | None,
    ) -> list[RawExpense]:
        """Expenses the user takes part in, with the amount set to their share."""
        if coerce_user_id(user_id) is None:
            logger.debug("No numeric user id given, no personal expenses")
            return []

        personal: list[RawExpense] = []
        for expense in expenses:
            share = PersonalShareService.find_share(expense.shares or [], user_id)
            if share is None:
                continue
            personal.append(expense.model_copy(update={"amount": share.share_amount}))
        return personal
