"""Shared domain components.

This module exports the exceptions and time helpers used across the
domain services.
"""

from ledgerlens.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    InvalidDateError,
    InvalidFilterError,
    InvalidTimeOffsetError,
    ValidationError,
)
from ledgerlens.domain.shared.time import (
    end_of_day,
    last_day_of_month,
    local_now,
    local_today,
    parse_entry_date,
    shift_months,
    start_of_day,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "InvalidDateError",
    "InvalidFilterError",
    "InvalidTimeOffsetError",
    # Utilities
    "end_of_day",
    "last_day_of_month",
    "local_now",
    "local_today",
    "parse_entry_date",
    "shift_months",
    "start_of_day",
]
