"""Entry list for the active window, search and filters."""

from __future__ import annotations

from datetime import date

from ledgerlens.application.dtos import EntryListResult
from ledgerlens.application.queries.base import EntriesQuery
from ledgerlens.domain.entries.services import EntryFilterService
from ledgerlens.domain.entries.value_objects import ListViewState
from ledgerlens.domain.shared.time import local_today


class EntryListQuery(EntriesQuery):
    """Filter unified entries the way the list view shows them."""

    def execute(
        self,
        state: ListViewState,
        today: date | None = None,
    ) -> EntryListResult:
        today = today or local_today()
        window = self._window(state.view_type, state.time_offset, today)
        entries = self._unified_entries()
        criteria = state.to_criteria(window.date_range)

        filtered = self._cached(
            "entry_list",
            criteria,
            lambda: EntryFilterService.filter(entries, criteria),
        )
        return EntryListResult(
            entries=filtered,
            window=window,
            stats=EntryFilterService.filter_stats(filtered),
            categories=EntryFilterService.unique_categories(entries),
        )
