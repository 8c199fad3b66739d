"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
whole engine. All domain exceptions inherit from DomainException so the
presentation layer can report them in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for callers of the engine.

    These codes are part of the public contract. Should not be changed.
    """

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_VIEW_TYPE = "INVALID_VIEW_TYPE"
    INVALID_TIME_OFFSET = "INVALID_TIME_OFFSET"
    INVALID_FILTER = "INVALID_FILTER"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not shown to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidDateError(ValidationError):
    """Raised when an entry date cannot be parsed."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Invalid date: {value!r}",
            ErrorCode.INVALID_DATE,
            {"value": value},
        )
        self.value = value


class InvalidTimeOffsetError(ValidationError):
    """Raised when navigating to a window after the current one."""

    def __init__(self, time_offset: int) -> None:
        super().__init__(
            f"Time offset must be 0 or negative, got {time_offset}",
            ErrorCode.INVALID_TIME_OFFSET,
            {"time_offset": time_offset},
        )
        self.time_offset = time_offset


class InvalidFilterError(ValidationError):
    """Raised when filter criteria are incomplete or contradictory."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.INVALID_FILTER, details)
