"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CompleteTodoCommand(Command[TodoDTO]):
        todo_id: int
        user_id: str

    class CompleteTodoHandler(CommandHandler[CompleteTodoCommand, TodoDTO]):
        request_type = CompleteTodoCommand
        action = "complete todo"

        def __init__(self, todo_repository: TodoRepository, uow: UnitOfWork):
            ...

        async def execute(self, command: CompleteTodoCommand) -> Result[TodoDTO]:
            ...

Handlers implement execute(); callers go through handle(), which converts
every expected and unexpected exception into a failed Result.
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from officeops.domain.common.result import ErrorType, Result
from officeops.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    PersistenceError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
TRequest = TypeVar("TRequest", bound="Request")


class Request(ABC, Generic[T]):
    """Base class for anything routed to exactly one handler"""

    pass


class Command(Request[T]):
    """Base class for write operations"""

    pass


class Query(Request[T]):
    """Base class for read operations"""

    pass


class RequestHandler(ABC, Generic[TRequest, T]):
    request_type: ClassVar[type[Request]]
    action: ClassVar[str] = "handle request"

    async def handle(self, request: TRequest) -> Result[T]:
        try:
            return await self.execute(request)
        except DomainValidationError as e:
            return Result.failure(e.message, ErrorType.VALIDATION)
        except EntityNotFoundError as e:
            return Result.failure(e.message, ErrorType.NOT_FOUND)
        except PersistenceError as e:
            logger.error("Persistence failure in %s: %s", type(self).__name__, e)
            return Result.failure(
                f"Failed to {self.action}: {e.message}", ErrorType.PERSISTENCE
            )
        except Exception as e:
            logger.exception("Unexpected error in %s", type(self).__name__)
            return Result.failure(f"Failed to {self.action}: {e}", ErrorType.UNEXPECTED)

    @abstractmethod
    async def execute(self, request: TRequest) -> Result[T]:
        """Perform the use case and return a Result"""
        ...


class CommandHandler(RequestHandler[TRequest, T]):
    pass


class QueryHandler(RequestHandler[TRequest, T]):
    pass
