"""
UserId Value Object - identity of the acting user.
"""

from __future__ import annotations

from dataclasses import dataclass

from officeops.domain.common.result import Result
from officeops.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class UserId:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise DomainValidationError("User ID cannot be null or empty", "user_id")

        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def create(cls, value: str) -> Result[UserId]:
        try:
            return Result.success(cls(value))
        except DomainValidationError as e:
            return Result.failure(e.message)

    def __str__(self) -> str:
        return self.value
