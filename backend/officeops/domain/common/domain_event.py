"""
DomainEvent - immutable record of something that happened to an aggregate.

Events are created only by aggregate business methods. Each concrete event is
a frozen dataclass; occurred_on is stamped at construction (UTC).
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    occurred_on: datetime = field(default_factory=_utcnow)

    @property
    def event_type(self) -> str:
        return type(self).__name__
