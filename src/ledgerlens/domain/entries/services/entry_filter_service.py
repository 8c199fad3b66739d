"""List filter pipeline.

Order of application:
1. search (replaces windowing) or date window plus optional bucket
2. category
3. type
The result is always sorted newest first with a stable sort.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from ledgerlens.domain.entries.entities import UnifiedEntry
from ledgerlens.domain.entries.services.category_name_service import (
    clean_category_name,
)
from ledgerlens.domain.entries.value_objects.breakdown import CategoryLabel, FilterStats
from ledgerlens.domain.entries.value_objects.date_range import DateRange
from ledgerlens.domain.entries.value_objects.filter_options import (
    EntryFilterCriteria,
    FilterOptions,
)
from ledgerlens.domain.entries.value_objects.view_type import ViewType
from ledgerlens.domain.shared.exceptions import InvalidFilterError

logger = logging.getLogger(__name__)


def search_tokens(query: str) -> list[str]:
    return query.lower().split()


def sort_newest_first(entries: Iterable[UnifiedEntry]) -> list[UnifiedEntry]:
    # sorted() keeps equal dates in input order, also with reverse=True
    return sorted(entries, key=lambda e: e.occurred_at, reverse=True)


class EntryFilterService:
    """Narrow unified entries for the list view."""

    @staticmethod
    def filter(
        entries: Sequence[UnifiedEntry],
        criteria: EntryFilterCriteria,
    ) -> list[UnifiedEntry]:
        if criteria.is_search_active:
            if not criteria.search_query.strip():
                return []
            result = EntryFilterService.search(entries, criteria.search_query)
        else:
            if criteria.date_range is None:
                msg = "A date range is required when search is not active"
                raise InvalidFilterError(msg)
            result = EntryFilterService.within_range(entries, criteria.date_range)
            if criteria.selected_bucket:
                result = EntryFilterService.in_bucket(
                    result,
                    criteria.selected_bucket,
                    criteria.view_type,
                )

        result = EntryFilterService.apply_options(result, criteria.options)

        logger.debug(
            "Filtered %d of %d entries (search=%s)",
            len(result),
            len(entries),
            criteria.is_search_active,
        )
        return sort_newest_first(result)

    @staticmethod
    def search(entries: Iterable[UnifiedEntry], query: str) -> list[UnifiedEntry]:
        """Entries whose description contains every token of ``query``."""
        tokens = search_tokens(query)
        if not tokens:
            return []
        return [
            entry
            for entry in entries
            if all(token in entry.description.lower() for token in tokens)
        ]

    @staticmethod
    def within_range(
        entries: Iterable[UnifiedEntry],
        date_range: DateRange,
    ) -> list[UnifiedEntry]:
        return [entry for entry in entries if date_range.contains(entry.occurred_at)]

    @staticmethod
    def in_bucket(
        entries: Iterable[UnifiedEntry],
        label: str,
        view_type: ViewType,
    ) -> list[UnifiedEntry]:
        """Entries whose chart bucket label equals ``label`` exactly."""
        return [
            entry for entry in entries if view_type.bucket_label(entry.day) == label
        ]

    @staticmethod
    def matches_category(entry: UnifiedEntry, category_id: str) -> bool:
        if entry.category_id is not None:
            return entry.category_id == category_id
        return clean_category_name(entry.category).name == category_id

    @staticmethod
    def apply_options(
        entries: Iterable[UnifiedEntry],
        options: FilterOptions,
    ) -> list[UnifiedEntry]:
        """Category filter, then type filter."""
        result = list(entries)
        if options.category_id:
            result = [
                entry
                for entry in result
                if EntryFilterService.matches_category(entry, options.category_id)
            ]
        if options.show_income is not None:
            result = [
                entry for entry in result if entry.is_income == options.show_income
            ]
        return result

    @staticmethod
    def unique_categories(entries: Iterable[UnifiedEntry]) -> list[CategoryLabel]:
        """Distinct cleaned category names, first raw spelling wins."""
        seen: dict[str, CategoryLabel] = {}
        for entry in entries:
            cleaned = clean_category_name(entry.category)
            if cleaned.name not in seen:
                seen[cleaned.name] = CategoryLabel(
                    name=cleaned.name,
                    raw_name=entry.category,
                )
        return sorted(seen.values(), key=lambda c: c.name.lower())

    @staticmethod
    def filter_stats(entries: Sequence[UnifiedEntry]) -> FilterStats:
        income_count = sum(1 for entry in entries if entry.is_income)
        return FilterStats(
            total=len(entries),
            total_amount=sum((abs(e.amount) for e in entries), Decimal("0")),
            expense_count=len(entries) - income_count,
            income_count=income_count,
        )
