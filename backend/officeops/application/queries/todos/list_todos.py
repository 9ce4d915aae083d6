"""List Todos Queries - all, completed, pending and paged views of a user's todos."""

from dataclasses import dataclass

from officeops.application.commands.todos.loading import parse_user_id
from officeops.application.common.interfaces import Query, QueryHandler
from officeops.application.dto.todo import TodoDTO
from officeops.domain.common.result import PagedResult, Result
from officeops.domain.exceptions import DomainValidationError
from officeops.domain.ports.repositories import TodoRepository

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class GetAllTodosQuery(Query[list[TodoDTO]]):
    user_id: str


@dataclass(frozen=True)
class GetCompletedTodosQuery(Query[list[TodoDTO]]):
    user_id: str


@dataclass(frozen=True)
class GetPendingTodosQuery(Query[list[TodoDTO]]):
    user_id: str


@dataclass(frozen=True)
class GetPagedTodosQuery(Query[PagedResult[TodoDTO]]):
    user_id: str
    page: int = 1
    page_size: int = 10


class GetAllTodosHandler(QueryHandler[GetAllTodosQuery, list[TodoDTO]]):
    request_type = GetAllTodosQuery
    action = "get todos"

    def __init__(self, todo_repository: TodoRepository):
        self._todo_repository = todo_repository

    async def execute(self, query: GetAllTodosQuery) -> Result[list[TodoDTO]]:
        todos = await self._todo_repository.get_all_for_user(parse_user_id(query.user_id))
        return Result.success([TodoDTO.from_entity(todo) for todo in todos])


class GetCompletedTodosHandler(QueryHandler[GetCompletedTodosQuery, list[TodoDTO]]):
    request_type = GetCompletedTodosQuery
    action = "get completed todos"

    def __init__(self, todo_repository: TodoRepository):
        self._todo_repository = todo_repository

    async def execute(self, query: GetCompletedTodosQuery) -> Result[list[TodoDTO]]:
        todos = await self._todo_repository.get_completed_for_user(
            parse_user_id(query.user_id)
        )
        return Result.success([TodoDTO.from_entity(todo) for todo in todos])


class GetPendingTodosHandler(QueryHandler[GetPendingTodosQuery, list[TodoDTO]]):
    request_type = GetPendingTodosQuery
    action = "get pending todos"

    def __init__(self, todo_repository: TodoRepository):
        self._todo_repository = todo_repository

    async def execute(self, query: GetPendingTodosQuery) -> Result[list[TodoDTO]]:
        todos = await self._todo_repository.get_pending_for_user(
            parse_user_id(query.user_id)
        )
        return Result.success([TodoDTO.from_entity(todo) for todo in todos])


class GetPagedTodosHandler(QueryHandler[GetPagedTodosQuery, PagedResult[TodoDTO]]):
    request_type = GetPagedTodosQuery
    action = "get paged todos"

    def __init__(self, todo_repository: TodoRepository, max_page_size: int = MAX_PAGE_SIZE):
        self._todo_repository = todo_repository
        self._max_page_size = max_page_size

    async def execute(self, query: GetPagedTodosQuery) -> Result[PagedResult[TodoDTO]]:
        if query.page < 1:
            raise DomainValidationError("Page must be greater than 0", "page")
        if not 1 <= query.page_size <= self._max_page_size:
            raise DomainValidationError(
                f"Page size must be between 1 and {self._max_page_size}", "page_size"
            )

        todos, total_count = await self._todo_repository.get_paged_for_user(
            parse_user_id(query.user_id), query.page, query.page_size
        )
        return Result.success(
            PagedResult(
                items=[TodoDTO.from_entity(todo) for todo in todos],
                total_count=total_count,
                page=query.page,
                page_size=query.page_size,
            )
        )
