"""Filter options for the entry list and the chart."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ledgerlens.domain.entries.value_objects.date_range import DateRange
from ledgerlens.domain.entries.value_objects.view_type import ViewType
from ledgerlens.domain.shared.exceptions import InvalidFilterError


class FilterType(str, Enum):
    """Primary filter dimension picked in the filter menu."""

    ALL = "all"
    TYPE = "type"
    CATEGORY = "category"


@dataclass(frozen=True)
class FilterOptions:
    """Type and category constraints; ``None`` means unconstrained."""

    category_id: str | None = None
    show_income: bool | None = None

    def with_category(self, category_id: str | None) -> FilterOptions:
        return replace(self, category_id=category_id)

    def with_entry_type(self, entry_type: str) -> FilterOptions:
        """Select 'income' or 'expense' entries."""
        if entry_type not in ("income", "expense"):
            msg = f"Entry type must be 'income' or 'expense', got {entry_type!r}"
            raise InvalidFilterError(msg, {"entry_type": entry_type})
        return replace(self, show_income=entry_type == "income")

    @property
    def is_empty(self) -> bool:
        return self.category_id is None and self.show_income is None


@dataclass(frozen=True)
class EntryFilterCriteria:
    """Everything the list pipeline needs for one pass.

    ``date_range`` is required unless search is active; search mode
    ignores windowing and bucket selection.
    """

    is_search_active: bool = False
    search_query: str = ""
    date_range: DateRange | None = None
    selected_bucket: str | None = None
    view_type: ViewType = ViewType.WEEK
    options: FilterOptions = FilterOptions()
