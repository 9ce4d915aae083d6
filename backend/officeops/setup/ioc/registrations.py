"""
Static registrations - the closed sets the container is checked against.

- TODO_REQUEST_TYPES: every command/query that must have exactly one handler
- default_listener_bindings(): event type → listeners, built at startup

Adding a request type here without wiring its handler in AppProvider makes
process start fail with ConfigurationError.
"""

from typing import Iterable, Mapping

from officeops.application.commands.todos import (
    CompleteTodoCommand,
    CreateTodoCommand,
    DeleteTodoCommand,
    ReopenTodoCommand,
    UpdateTodoCommand,
)
from officeops.application.common.event_dispatcher import Listener, ListenerRegistry
from officeops.application.event_handlers.todos import TODO_LOGGING_LISTENERS
from officeops.application.queries.todos import (
    GetAllTodosQuery,
    GetCompletedTodosQuery,
    GetPagedTodosQuery,
    GetPendingTodosQuery,
    GetTodoByIdQuery,
    GetTodoStatsQuery,
)
from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.events import TODO_EVENT_TYPES

TODO_REQUEST_TYPES = (
    CreateTodoCommand,
    UpdateTodoCommand,
    CompleteTodoCommand,
    ReopenTodoCommand,
    DeleteTodoCommand,
    GetTodoByIdQuery,
    GetAllTodosQuery,
    GetCompletedTodosQuery,
    GetPendingTodosQuery,
    GetPagedTodosQuery,
    GetTodoStatsQuery,
)

KNOWN_EVENT_TYPES: tuple[type[DomainEvent], ...] = TODO_EVENT_TYPES


def default_listener_bindings() -> dict[type[DomainEvent], list[Listener]]:
    return {event_type: list(listeners) for event_type, listeners in TODO_LOGGING_LISTENERS.items()}


def build_listener_registry(
    bindings: Mapping[type[DomainEvent], Iterable[Listener]],
) -> ListenerRegistry:
    return ListenerRegistry(bindings, known_events=KNOWN_EVENT_TYPES)
