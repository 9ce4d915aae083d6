"""
COMMON DOMAIN BUILDING BLOCKS

- AggregateRoot: entity base that records domain events
- DomainEvent: immutable fact base
- EntityId: typed identifier with an "unassigned" sentinel
- Result / PagedResult / ErrorType: explicit success/failure values
"""

from officeops.domain.common.aggregate_root import AggregateRoot
from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.common.entity_id import EntityId
from officeops.domain.common.result import ErrorType, PagedResult, Result

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "EntityId",
    "ErrorType",
    "PagedResult",
    "Result",
]
