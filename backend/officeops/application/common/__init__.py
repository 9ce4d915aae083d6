"""Shared application building blocks."""

from officeops.application.common.errors import ConfigurationError, InvalidOperationError
from officeops.application.common.event_dispatcher import (
    DomainEventDispatcher,
    Listener,
    ListenerRegistry,
)
from officeops.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
    Request,
    RequestHandler,
)
from officeops.application.common.request_router import HandlerRegistry, RequestRouter
from officeops.application.common.unit_of_work import UnitOfWork, UnitOfWorkState

__all__ = [
    "Command",
    "CommandHandler",
    "ConfigurationError",
    "DomainEventDispatcher",
    "HandlerRegistry",
    "InvalidOperationError",
    "Listener",
    "ListenerRegistry",
    "Query",
    "QueryHandler",
    "Request",
    "RequestHandler",
    "RequestRouter",
    "UnitOfWork",
    "UnitOfWorkState",
]
