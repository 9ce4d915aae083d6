"""
EntityId - base for typed aggregate identifiers.

The persistence layer assigns identifiers on first save. Until then an
aggregate holds the unassigned sentinel (value 0).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

TId = TypeVar("TId", bound="EntityId")

UNASSIGNED = 0


@dataclass(frozen=True)
class EntityId:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} must wrap an int, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} cannot be negative: {self.value}")

    @classmethod
    def unassigned(cls: type[TId]) -> TId:
        return cls(UNASSIGNED)

    @property
    def is_assigned(self) -> bool:
        return self.value != UNASSIGNED

    def __str__(self) -> str:
        return str(self.value)
