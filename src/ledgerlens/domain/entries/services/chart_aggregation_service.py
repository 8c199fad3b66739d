"""Bucket entries of a window into a gap-free chart series."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Sequence

from ledgerlens.domain.entries.entities import UnifiedEntry
from ledgerlens.domain.entries.services.entry_filter_service import EntryFilterService
from ledgerlens.domain.entries.value_objects.chart_point import (
    BucketFill,
    ChartDataPoint,
)
from ledgerlens.domain.entries.value_objects.date_range import DateRange
from ledgerlens.domain.entries.value_objects.filter_options import FilterOptions
from ledgerlens.domain.entries.value_objects.view_type import ViewType
from ledgerlens.domain.shared.time import local_today

logger = logging.getLogger(__name__)


class ChartAggregationService:
    """Per-day totals for the week or month chart."""

    @staticmethod
    def aggregate(
        entries: Sequence[UnifiedEntry],
        date_range: DateRange,
        view_type: ViewType,
        options: FilterOptions | None = None,
        today: date | None = None,
    ) -> list[ChartDataPoint]:
        """One point per day of ``date_range``, oldest first.

        Chart options are applied on their own, independent of whatever
        the list is filtered by. Amounts are summed as magnitudes.
        """
        today = today or local_today()
        selected = EntryFilterService.apply_options(entries, options or FilterOptions())
        selected = EntryFilterService.within_range(selected, date_range)

        # Seed every day so the series has no gaps
        totals: dict[str, Decimal] = {
            view_type.bucket_label(day): Decimal("0") for day in date_range.days()
        }
        for entry in selected:
            totals[view_type.bucket_label(entry.day)] += abs(entry.amount)
        logger.debug(
            "Aggregated %d entries into %d %s buckets",
            len(selected),
            len(totals),
            view_type.value,
        )

        line_value = (
            sum(totals.values(), Decimal("0")) / len(totals) if totals else Decimal("0")
        )
        today_label = (
            view_type.bucket_label(today) if date_range.contains_day(today) else None
        )

        return [
            ChartDataPoint(
                name=label,
                amount=amount,
                line_value=line_value,
                fill=(
                    BucketFill.HIGHLIGHT if label == today_label else BucketFill.NORMAL
                ),
            )
            for label, amount in totals.items()
        ]
