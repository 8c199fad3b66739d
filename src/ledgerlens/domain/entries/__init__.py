"""Entries domain layer exports."""

# Entities
from ledgerlens.domain.entries.entities.unified_entry import UnifiedEntry

# Domain Services
from ledgerlens.domain.entries.services.chart_aggregation_service import (
    ChartAggregationService,
)
from ledgerlens.domain.entries.services.date_range_service import DateRangeService
from ledgerlens.domain.entries.services.entry_filter_service import (
    EntryFilterService,
)
from ledgerlens.domain.entries.services.entry_unification_service import (
    EntryUnificationService,
)
from ledgerlens.domain.entries.services.period_breakdown_service import (
    PeriodBreakdownService,
)
from ledgerlens.domain.entries.services.search_filter_service import (
    SearchFilterService,
)

# Value Objects
from ledgerlens.domain.entries.value_objects.date_range import DateRange
from ledgerlens.domain.entries.value_objects.raw_entries import AllEntriesResponse
from ledgerlens.domain.entries.value_objects.view_type import ViewType

__all__ = [
    # Entities
    "UnifiedEntry",
    # Value Objects
    "AllEntriesResponse",
    "DateRange",
    "ViewType",
    # Domain Services
    "ChartAggregationService",
    "DateRangeService",
    "EntryFilterService",
    "EntryUnificationService",
    "PeriodBreakdownService",
    "SearchFilterService",
]
