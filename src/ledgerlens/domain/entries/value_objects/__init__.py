"""Value objects for the entries domain."""

from ledgerlens.domain.entries.value_objects.breakdown import (
    BreakdownBucket,
    BreakdownPeriod,
    CategoryLabel,
    CategorySpending,
    FilterStats,
    SummaryTotals,
)
from ledgerlens.domain.entries.value_objects.chart_point import (
    BucketFill,
    ChartDataPoint,
)
from ledgerlens.domain.entries.value_objects.date_range import (
    DateRange,
    format_range_label,
)
from ledgerlens.domain.entries.value_objects.filter_options import (
    EntryFilterCriteria,
    FilterOptions,
    FilterType,
)
from ledgerlens.domain.entries.value_objects.list_view_state import ListViewState
from ledgerlens.domain.entries.value_objects.raw_entries import (
    AllEntriesResponse,
    ExpenseShare,
    RawBudget,
    RawCategory,
    RawExpense,
    RawIncome,
)
from ledgerlens.domain.entries.value_objects.search_filters import (
    ALL_CATEGORIES,
    AmountBand,
    DateFilter,
    SearchCardFilters,
)
from ledgerlens.domain.entries.value_objects.view_type import ViewType

__all__ = [
    "ALL_CATEGORIES",
    "AllEntriesResponse",
    "AmountBand",
    "BreakdownBucket",
    "BreakdownPeriod",
    "BucketFill",
    "CategoryLabel",
    "CategorySpending",
    "ChartDataPoint",
    "DateFilter",
    "DateRange",
    "EntryFilterCriteria",
    "ExpenseShare",
    "FilterOptions",
    "FilterStats",
    "FilterType",
    "ListViewState",
    "RawBudget",
    "RawCategory",
    "RawExpense",
    "RawIncome",
    "SearchCardFilters",
    "SummaryTotals",
    "ViewType",
    "format_range_label",
]
