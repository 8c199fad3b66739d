"""Unified entry: expenses and income in one normalized shape."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from ledgerlens.domain.entries.value_objects.raw_entries import ExpenseShare


class UnifiedEntry(BaseModel):
    """Normalized transaction as shown in the list and the chart.

    ``amount`` is always the non-negative magnitude attributable to the
    viewing context: the full amount, or one participant's share.
    ``date`` keeps the source string, ``occurred_at`` is its parsed form.
    """

    id: int | str
    description: str
    category: str
    category_id: str | None = None
    emoji: str | None = None
    date: str
    occurred_at: datetime
    amount: Decimal
    is_income: bool
    is_personal_share: bool = False
    original_amount: Decimal | None = None
    user_share: ExpenseShare | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("amount")
    @classmethod
    def _magnitude(cls, v: Decimal) -> Decimal:
        return abs(v)

    @property
    def day(self) -> date:
        return self.occurred_at.date()

    def __str__(self) -> str:
        sign = "+" if self.is_income else "-"
        return f"{self.day} {self.description} {sign}{self.amount:.2f}"
