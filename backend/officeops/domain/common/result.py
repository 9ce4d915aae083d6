"""
Result - explicit success/failure value returned by every pipeline operation.

Usage:
    title = TodoTitle.create(raw)
    if title.is_failure:
        return Result.fail(title.error, title.error_type)

    return Result.success(todo_dto)

Rules:
- A Result is either a success (optionally holding a value) or a failure
  holding a human-readable error; never both.
- Reading .value on a failure raises ValueError.
- error_type lets callers tell "not found" apart from validation failures.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorType(str, Enum):
    """Failure categories surfaced to callers."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"
    DISPATCH = "dispatch"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Result(Generic[T]):
    is_success: bool
    _value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None

    def __post_init__(self):
        if self.is_success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.is_success and not self.error:
            raise ValueError("A failed result must carry an error message")

    # ==================== FACTORIES ====================

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(is_success=True, _value=value)

    @classmethod
    def ok(cls) -> Result[None]:
        """Success without a payload."""
        return cls(is_success=True)

    @classmethod
    def failure(
        cls, error: str, error_type: ErrorType = ErrorType.VALIDATION
    ) -> Result[T]:
        return cls(is_success=False, error=error, error_type=error_type)

    @classmethod
    def fail(
        cls, error: str, error_type: ErrorType = ErrorType.VALIDATION
    ) -> Result[None]:
        """Failure without a payload type."""
        return cls(is_success=False, error=error, error_type=error_type)

    @classmethod
    def not_found(cls, error: str) -> Result[T]:
        return cls.failure(error, ErrorType.NOT_FOUND)

    # ==================== ACCESSORS ====================

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        if not self.is_success:
            raise ValueError(f"Cannot read the value of a failed result: {self.error}")
        return self._value  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        """Envelope surfaced to outer layers: {success, value, error}."""
        return {
            "success": self.is_success,
            "value": self._value if self.is_success else None,
            "error": self.error,
        }


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of items plus paging metadata."""

    items: list[T]
    total_count: int
    page: int
    page_size: int
    total_pages: int = field(init=False)
    has_next_page: bool = field(init=False)
    has_previous_page: bool = field(init=False)

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

        total_pages = math.ceil(self.total_count / self.page_size)
        # frozen dataclass: derived fields are set once here
        object.__setattr__(self, "total_pages", total_pages)
        object.__setattr__(self, "has_next_page", self.page < total_pages)
        object.__setattr__(self, "has_previous_page", self.page > 1)
