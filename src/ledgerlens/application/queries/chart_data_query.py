"""Chart series for the active window."""

from __future__ import annotations

from datetime import date

from ledgerlens.application.dtos import ChartResult
from ledgerlens.application.queries.base import EntriesQuery
from ledgerlens.domain.entries.services import ChartAggregationService
from ledgerlens.domain.entries.value_objects import FilterOptions, ViewType
from ledgerlens.domain.shared.time import local_today


class ChartDataQuery(EntriesQuery):
    """Return one point per day of the week or month window."""

    def execute(
        self,
        view_type: ViewType,
        time_offset: int = 0,
        options: FilterOptions | None = None,
        today: date | None = None,
    ) -> ChartResult:
        today = today or local_today()
        options = options or FilterOptions()
        window = self._window(view_type, time_offset, today)
        entries = self._unified_entries()

        points = self._cached(
            "chart",
            (view_type, window.date_range, options, today),
            lambda: ChartAggregationService.aggregate(
                entries,
                window.date_range,
                view_type,
                options=options,
                today=today,
            ),
        )
        return ChartResult(points=points, window=window)
