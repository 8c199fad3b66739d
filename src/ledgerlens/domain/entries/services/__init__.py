"""Domain services for the entries domain."""

from ledgerlens.domain.entries.services.category_name_service import (
    DEFAULT_CATEGORY_NAME,
    CleanedCategory,
    clean_category_name,
)
from ledgerlens.domain.entries.services.chart_aggregation_service import (
    ChartAggregationService,
)
from ledgerlens.domain.entries.services.date_range_service import (
    DateRangeService,
    DateWindow,
)
from ledgerlens.domain.entries.services.entry_filter_service import (
    EntryFilterService,
    search_tokens,
    sort_newest_first,
)
from ledgerlens.domain.entries.services.entry_unification_service import (
    DEFAULT_EXPENSE_CATEGORY,
    DEFAULT_INCOME_CATEGORY,
    DEFAULT_INCOME_EMOJI,
    EntryUnificationService,
)
from ledgerlens.domain.entries.services.period_breakdown_service import (
    DEFAULT_CATEGORY_EMOJI,
    PeriodBreakdownService,
)
from ledgerlens.domain.entries.services.personal_share_service import (
    PersonalShare,
    PersonalShareService,
    coerce_user_id,
)
from ledgerlens.domain.entries.services.search_filter_service import (
    SearchFilterService,
)

__all__ = [
    "ChartAggregationService",
    "CleanedCategory",
    "DEFAULT_CATEGORY_EMOJI",
    "DEFAULT_CATEGORY_NAME",
    "DEFAULT_EXPENSE_CATEGORY",
    "DEFAULT_INCOME_CATEGORY",
    "DEFAULT_INCOME_EMOJI",
    "DateRangeService",
    "DateWindow",
    "EntryFilterService",
    "EntryUnificationService",
    "PeriodBreakdownService",
    "PersonalShare",
    "PersonalShareService",
    "SearchFilterService",
    "clean_category_name",
    "coerce_user_id",
    "search_tokens",
    "sort_newest_first",
]
