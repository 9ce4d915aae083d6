"""
DOMAIN EVENTS - closed unions of facts per aggregate

Listener registries are validated against these unions at startup.
"""

from officeops.domain.events.todo_events import (
    TODO_EVENT_TYPES,
    TodoCompleted,
    TodoCreated,
    TodoDeleted,
    TodoEvent,
    TodoReopened,
    TodoUpdated,
)

__all__ = [
    "TODO_EVENT_TYPES",
    "TodoCompleted",
    "TodoCreated",
    "TodoDeleted",
    "TodoEvent",
    "TodoReopened",
    "TodoUpdated",
]
