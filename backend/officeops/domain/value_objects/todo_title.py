"""
TodoTitle Value Object - non-empty title of at most 200 characters.

The length bound applies to the raw input; the stored value is trimmed.
"""

from __future__ import annotations

from dataclasses import dataclass

from officeops.domain.common.result import Result
from officeops.domain.exceptions.validation_error import DomainValidationError

MAX_TITLE_LENGTH = 200


@dataclass(frozen=True)
class TodoTitle:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise DomainValidationError("Todo title cannot be null or empty", "title")
        if len(self.value) > MAX_TITLE_LENGTH:
            raise DomainValidationError(
                f"Todo title cannot exceed {MAX_TITLE_LENGTH} characters", "title"
            )

        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def create(cls, value: str) -> Result[TodoTitle]:
        try:
            return Result.success(cls(value))
        except DomainValidationError as e:
            return Result.failure(e.message)

    def __str__(self) -> str:
        return self.value
