"""Advanced search over all entries."""

from __future__ import annotations

from datetime import datetime

from ledgerlens.application.queries.base import EntriesQuery
from ledgerlens.domain.entries.entities import UnifiedEntry
from ledgerlens.domain.entries.services import SearchFilterService
from ledgerlens.domain.entries.value_objects import SearchCardFilters
from ledgerlens.domain.shared.time import local_now


class SearchQuery(EntriesQuery):
    """Apply the search card filters, ignoring any date window."""

    def execute(
        self,
        filters: SearchCardFilters,
        now: datetime | None = None,
    ) -> list[UnifiedEntry]:
        now = now or local_now()
        entries = self._unified_entries()
        return self._cached(
            "search",
            (filters, now),
            lambda: SearchFilterService.filter_transactions(entries, filters, now=now),
        )
