"""Transient state behind the entry list: window, search and filters."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ledgerlens.domain.entries.value_objects.date_range import DateRange
from ledgerlens.domain.entries.value_objects.filter_options import (
    EntryFilterCriteria,
    FilterOptions,
    FilterType,
)
from ledgerlens.domain.entries.value_objects.view_type import ViewType
from ledgerlens.domain.shared.exceptions import InvalidTimeOffsetError


@dataclass(frozen=True)
class ListViewState:
    """Immutable list state; every transition returns a new instance.

    ``time_offset`` counts windows from the current one and never goes
    above zero.
    """

    view_type: ViewType = ViewType.WEEK
    time_offset: int = 0
    selected_bucket: str | None = None
    is_search_active: bool = False
    search_query: str = ""
    filter_type: FilterType = FilterType.ALL
    options: FilterOptions = FilterOptions()

    def __post_init__(self):
        if self.time_offset > 0:
            raise InvalidTimeOffsetError(self.time_offset)

    @classmethod
    def default(cls, view_type: ViewType = ViewType.WEEK) -> ListViewState:
        return cls(view_type=view_type)

    # Search

    def toggle_search(self) -> ListViewState:
        return replace(self, is_search_active=True, search_query="")

    def cancel_search(self) -> ListViewState:
        return replace(self, is_search_active=False, search_query="")

    def with_search_query(self, query: str) -> ListViewState:
        return replace(self, search_query=query)

    # Filters

    def clear_filter(self) -> ListViewState:
        return replace(self, filter_type=FilterType.ALL, options=FilterOptions())

    def with_filter_type(self, filter_type: FilterType) -> ListViewState:
        # Options never carry over between dimensions
        return replace(self, filter_type=filter_type, options=FilterOptions())

    def with_category(self, category_id: str) -> ListViewState:
        return replace(self, options=self.options.with_category(category_id))

    def with_entry_type(self, entry_type: str) -> ListViewState:
        return replace(self, options=self.options.with_entry_type(entry_type))

    # Window navigation

    def with_view_type(self, view_type: ViewType) -> ListViewState:
        return replace(
            self,
            view_type=view_type,
            time_offset=0,
            selected_bucket=None,
        )

    def with_time_offset(self, time_offset: int) -> ListViewState:
        if time_offset > 0:
            raise InvalidTimeOffsetError(time_offset)
        return replace(self, time_offset=time_offset, selected_bucket=None)

    def go_back(self) -> ListViewState:
        return self.with_time_offset(self.time_offset - 1)

    def go_forward(self) -> ListViewState:
        return self.with_time_offset(self.time_offset + 1)

    def with_bucket(self, label: str | None) -> ListViewState:
        return replace(self, selected_bucket=label)

    def to_criteria(self, date_range: DateRange) -> EntryFilterCriteria:
        return EntryFilterCriteria(
            is_search_active=self.is_search_active,
            search_query=self.search_query,
            date_range=date_range,
            selected_bucket=self.selected_bucket,
            view_type=self.view_type,
            options=self.options,
        )
