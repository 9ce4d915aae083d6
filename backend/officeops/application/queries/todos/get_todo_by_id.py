"""Get Todo By Id Query."""

from dataclasses import dataclass

from officeops.application.commands.todos.loading import load_todo_for_user, parse_user_id
from officeops.application.common.interfaces import Query, QueryHandler
from officeops.application.dto.todo import TodoDTO
from officeops.domain.common.result import Result
from officeops.domain.ports.repositories import TodoRepository


@dataclass(frozen=True)
class GetTodoByIdQuery(Query[TodoDTO]):
    todo_id: int
    user_id: str


class GetTodoByIdHandler(QueryHandler[GetTodoByIdQuery, TodoDTO]):
    request_type = GetTodoByIdQuery
    action = "get todo"

    def __init__(self, todo_repository: TodoRepository):
        self._todo_repository = todo_repository

    async def execute(self, query: GetTodoByIdQuery) -> Result[TodoDTO]:
        user_id = parse_user_id(query.user_id)
        todo = await load_todo_for_user(self._todo_repository, query.todo_id, user_id)
        return Result.success(TodoDTO.from_entity(todo))
