"""
ENTITIES - Aggregates with identity

Each aggregate:
- Is created only through its factory (records exactly one "created" event)
- Changes state only through business methods
- Records at most one event per business method call
"""

from officeops.domain.entities.todo import Todo

__all__ = [
    "Todo",
]
