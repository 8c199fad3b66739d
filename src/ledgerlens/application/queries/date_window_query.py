"""Resolve the week or month window for a view type and offset."""

from __future__ import annotations

from datetime import date

from ledgerlens.application.queries.base import EntriesQuery
from ledgerlens.domain.entries.services import DateWindow
from ledgerlens.domain.entries.value_objects import ViewType
from ledgerlens.domain.shared.time import local_today


class DateWindowQuery(EntriesQuery):
    """Return the active window, clamped to the oldest entry."""

    def execute(
        self,
        view_type: ViewType,
        time_offset: int = 0,
        today: date | None = None,
    ) -> DateWindow:
        return self._window(view_type, time_offset, today or local_today())
