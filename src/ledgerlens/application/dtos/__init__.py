"""Data transfer objects returned by the query layer."""

from ledgerlens.application.dtos.entries_dto import (
    ChartResult,
    DashboardData,
    EntryListResult,
    ViewingContext,
)

__all__ = [
    "ChartResult",
    "DashboardData",
    "EntryListResult",
    "ViewingContext",
]
