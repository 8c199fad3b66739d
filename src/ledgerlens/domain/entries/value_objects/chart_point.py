"""Chart series value objects."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BucketFill(str, Enum):
    """Semantic bar colour; the renderer maps it to a theme colour."""

    HIGHLIGHT = "highlight"
    NORMAL = "normal"


@dataclass(frozen=True)
class ChartDataPoint:
    """One bar of the window chart."""

    name: str
    amount: Decimal
    line_value: Decimal  # Mean of all bucket totals, same on every point
    fill: BucketFill = BucketFill.NORMAL

    @property
    def is_highlighted(self) -> bool:
        return self.fill is BucketFill.HIGHLIGHT
