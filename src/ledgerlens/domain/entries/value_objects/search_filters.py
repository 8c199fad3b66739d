"""Filters offered by the advanced search card."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

ALL_CATEGORIES = "All Categories"


class AmountBand(str, Enum):
    """Amount bands; the inner bands share their boundary values."""

    ALL = "All Amounts"
    UNDER_10 = "Under $10"
    FROM_10_TO_50 = "$10 - $50"
    FROM_50_TO_100 = "$50 - $100"
    OVER_100 = "Over $100"

    def contains(self, amount: Decimal) -> bool:
        value = abs(amount)
        if self is AmountBand.UNDER_10:
            return value < 10
        if self is AmountBand.FROM_10_TO_50:
            return 10 <= value <= 50
        if self is AmountBand.FROM_50_TO_100:
            return 50 <= value <= 100
        if self is AmountBand.OVER_100:
            return value > 100
        return True


class DateFilter(str, Enum):
    """Named date ranges relative to the current moment."""

    ALL = "All Dates"
    TODAY = "Today"
    YESTERDAY = "Yesterday"
    THIS_WEEK = "This Week"
    THIS_MONTH = "This Month"


@dataclass(frozen=True)
class SearchCardFilters:
    """State of the search card's query box and three dropdowns."""

    search_query: str = ""
    category: str = ALL_CATEGORIES
    amount: AmountBand = AmountBand.ALL
    date: DateFilter = DateFilter.ALL

    def cleared(self) -> SearchCardFilters:
        """Drop the dropdown selections, keep the query."""
        return SearchCardFilters(search_query=self.search_query)
