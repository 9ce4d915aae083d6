"""
AggregateRoot - base for entities that record domain events.

Guidelines:
- Business methods mutate state in place and call _record_event() at most once
  per call, and only when observable state actually changed.
- domain_events is a read-only snapshot; the log is append-only.
- clear_domain_events() is the single sanctioned way to empty the log. The
  unit of work calls it once, after a successful dispatch.
- Equality: same concrete type and same assigned identifier. Unpersisted
  aggregates are only equal to themselves.
"""

from __future__ import annotations

from typing import Generic

from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.common.entity_id import TId


class AggregateRoot(Generic[TId]):
    def __init__(self, id: TId):
        self._id = id
        self._domain_events: list[DomainEvent] = []

    @property
    def id(self) -> TId:
        return self._id

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._domain_events)

    @property
    def has_pending_events(self) -> bool:
        return bool(self._domain_events)

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def assign_id(self, new_id: TId) -> None:
        """
        Called by the persistence layer on first save.

        Pending events that still carry the unassigned identifier are replaced
        by copies carrying new_id, in place, so order and timestamps survive.
        """
        if self._id.is_assigned:
            raise ValueError(
                f"{type(self).__name__} already has identity {self._id}"
            )
        if not new_id.is_assigned:
            raise ValueError("Cannot assign the unassigned identifier")

        self._id = new_id
        self._domain_events = [self._with_identity(e) for e in self._domain_events]

    def _with_identity(self, event: DomainEvent) -> DomainEvent:
        """Hook: return event re-stamped with the current id if it needs it."""
        return event

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, AggregateRoot) or type(self) is not type(other):
            return False
        if not self._id.is_assigned or not other._id.is_assigned:
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        # unpersisted aggregates hash by object identity
        if not self._id.is_assigned:
            return object.__hash__(self)
        return hash((type(self), self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id.value})"
