"""Query layer. Read-only operations over an entries response."""

from ledgerlens.application.queries.base import EntriesQuery
from ledgerlens.application.queries.chart_data_query import ChartDataQuery
from ledgerlens.application.queries.dashboard_query import DashboardQuery
from ledgerlens.application.queries.date_window_query import DateWindowQuery
from ledgerlens.application.queries.entry_list_query import EntryListQuery
from ledgerlens.application.queries.search_query import SearchQuery

__all__ = [
    "ChartDataQuery",
    "DashboardQuery",
    "DateWindowQuery",
    "EntriesQuery",
    "EntryListQuery",
    "SearchQuery",
]
