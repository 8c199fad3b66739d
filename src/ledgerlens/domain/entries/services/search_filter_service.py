"""Advanced search card filtering.

Unlike the list pipeline this works on the whole entry set, never on a
week or month window, and an empty query matches everything.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable

from ledgerlens.domain.entries.entities import UnifiedEntry
from ledgerlens.domain.entries.services.category_name_service import (
    clean_category_name,
)
from ledgerlens.domain.entries.services.entry_filter_service import (
    search_tokens,
    sort_newest_first,
)
from ledgerlens.domain.entries.value_objects.search_filters import (
    ALL_CATEGORIES,
    DateFilter,
    SearchCardFilters,
)
from ledgerlens.domain.shared.time import local_now, shift_months

logger = logging.getLogger(__name__)


class SearchFilterService:
    """Query, category, amount band and named date range in one pass."""

    @staticmethod
    def matches_search(entry: UnifiedEntry, query: str) -> bool:
        """Every token found in the description or the cleaned category."""
        tokens = search_tokens(query)
        if not tokens:
            return True
        description = entry.description.lower()
        category = clean_category_name(entry.category).name.lower()
        return all(token in description or token in category for token in tokens)

    @staticmethod
    def matches_category(entry: UnifiedEntry, category: str) -> bool:
        if category == ALL_CATEGORIES:
            return True
        return clean_category_name(entry.category).name == category

    @staticmethod
    def matches_date(
        entry: UnifiedEntry, date_filter: DateFilter, now: datetime
    ) -> bool:
        if date_filter is DateFilter.TODAY:
            return entry.day == now.date()
        if date_filter is DateFilter.YESTERDAY:
            return entry.day == now.date() - timedelta(days=1)
        if date_filter is DateFilter.THIS_WEEK:
            return entry.occurred_at >= now - timedelta(days=7)
        if date_filter is DateFilter.THIS_MONTH:
            return entry.occurred_at >= shift_months(now, -1)
        return True

    @staticmethod
    def filter_transactions(
        entries: Iterable[UnifiedEntry],
        filters: SearchCardFilters,
        now: datetime | None = None,
    ) -> list[UnifiedEntry]:
        now = now or local_now()
        result = [
            entry
            for entry in entries
            if SearchFilterService.matches_search(entry, filters.search_query)
            and SearchFilterService.matches_category(entry, filters.category)
            and filters.amount.contains(entry.amount)
            and SearchFilterService.matches_date(entry, filters.date, now)
        ]
        logger.debug("Search card kept %d entries", len(result))
        return sort_newest_first(result)
