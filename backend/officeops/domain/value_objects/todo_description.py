"""
TodoDescription Value Object - free text of at most 1000 characters.

A missing description is modelled as None on the aggregate, not as an empty
TodoDescription; create() maps None and blank text to a successful None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from officeops.domain.common.result import Result
from officeops.domain.exceptions.validation_error import DomainValidationError

MAX_DESCRIPTION_LENGTH = 1000


@dataclass(frozen=True)
class TodoDescription:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise DomainValidationError("Todo description must be text", "description")
        if len(self.value) > MAX_DESCRIPTION_LENGTH:
            raise DomainValidationError(
                f"Todo description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
                "description",
            )

        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def create(cls, value: Optional[str]) -> Result[Optional[TodoDescription]]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return Result.success(None)
        try:
            return Result.success(cls(value))
        except DomainValidationError as e:
            return Result.failure(e.message)

    def __str__(self) -> str:
        return self.value
