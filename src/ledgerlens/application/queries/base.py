"""Shared plumbing of the entry queries."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, TypeVar

from ledgerlens.application.cache import QueryCache
from ledgerlens.application.dtos import ViewingContext
from ledgerlens.domain.entries.entities import UnifiedEntry
from ledgerlens.domain.entries.services import (
    DEFAULT_INCOME_EMOJI,
    DateRangeService,
    DateWindow,
    EntryUnificationService,
)
from ledgerlens.domain.entries.value_objects import AllEntriesResponse, ViewType

T = TypeVar("T")


class EntriesQuery:
    """Base for queries over one entries response and viewing context.

    The response and context are fixed per instance, so every cached
    result is keyed by them plus the arguments of the call.
    """

    def __init__(
        self,
        response: AllEntriesResponse,
        context: ViewingContext | None = None,
        cache: QueryCache | None = None,
        income_fallback_emoji: str = DEFAULT_INCOME_EMOJI,
    ):
        self._response = response
        self._context = context or ViewingContext()
        self._cache = cache if cache is not None else QueryCache(maxsize=0)
        self._income_fallback_emoji = income_fallback_emoji

    def _cached(self, name: str, args: Any, compute: Callable[[], T]) -> T:
        source = (self._response, self._context, self._income_fallback_emoji)
        return self._cache.get_or_compute(name, (source, args), compute)

    def _unified_entries(self) -> list[UnifiedEntry]:
        return self._cached(
            "unify",
            (),
            lambda: EntryUnificationService.unify(
                self._response,
                is_personal_view=self._context.is_personal_view,
                user_id=self._context.user_id,
                is_group_view=self._context.is_group_view,
                income_fallback_emoji=self._income_fallback_emoji,
            ),
        )

    def _window(
        self,
        view_type: ViewType,
        time_offset: int,
        today: date,
    ) -> DateWindow:
        earliest = self._cached(
            "earliest_date",
            (),
            lambda: EntryUnificationService.earliest_entry_date(self._response),
        )
        return self._cached(
            "date_window",
            (view_type, time_offset, today),
            lambda: DateRangeService.calculate(
                view_type,
                time_offset,
                earliest_date=earliest,
                today=today,
            ),
        )
