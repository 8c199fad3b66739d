"""Raw records as delivered by the entries endpoint.

These mirror the JSON payload of the all-entries response. Collections
that are missing or null are read as empty lists.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawCategory(BaseModel):
    """Category attached to an expense, income or budget."""

    id: int | str | None = None
    name: str = ""
    emoji: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class ExpenseShare(BaseModel):
    """One participant's share of a split group expense."""

    user_id: int | str
    share_amount: Decimal

    model_config = ConfigDict(frozen=True, extra="ignore")


class RawExpense(BaseModel):
    """Expense row; ``is_income`` marks income booked through the expense log."""

    id: int | str
    description: str = ""
    date: str
    amount: Decimal
    is_income: bool = False
    category: RawCategory | None = None
    shares: list[ExpenseShare] | None = None
    payer_id: int | str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class RawIncome(BaseModel):
    """Income row; always income, never split."""

    id: int | str
    description: str = ""
    date: str
    amount: Decimal
    category: RawCategory | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class RawBudget(BaseModel):
    """Spending budget for one category."""

    id: int | str
    amount: Decimal = Decimal("0")
    category: RawCategory | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class AllEntriesResponse(BaseModel):
    """Combined payload of expenses, income and budgets."""

    expenses: list[RawExpense] = Field(default_factory=list)
    income: list[RawIncome] = Field(default_factory=list)
    budgets: list[RawBudget] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("expenses", "income", "budgets", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def empty(cls) -> AllEntriesResponse:
        return cls()
