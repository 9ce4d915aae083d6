"""Get Todo Stats Query - totals and completion rate (percent, 2 decimals)."""

from dataclasses import dataclass

from officeops.application.commands.todos.loading import parse_user_id
from officeops.application.common.interfaces import Query, QueryHandler
from officeops.application.dto.todo import TodoStatsDTO
from officeops.domain.common.result import Result
from officeops.domain.ports.repositories import TodoRepository


@dataclass(frozen=True)
class GetTodoStatsQuery(Query[TodoStatsDTO]):
    user_id: str


class GetTodoStatsHandler(QueryHandler[GetTodoStatsQuery, TodoStatsDTO]):
    request_type = GetTodoStatsQuery
    action = "get todo statistics"

    def __init__(self, todo_repository: TodoRepository):
        self._todo_repository = todo_repository

    async def execute(self, query: GetTodoStatsQuery) -> Result[TodoStatsDTO]:
        user_id = parse_user_id(query.user_id)
        total = await self._todo_repository.count_for_user(user_id)
        completed = await self._todo_repository.count_completed_for_user(user_id)
        pending = await self._todo_repository.count_pending_for_user(user_id)

        rate = round(completed / total * 100, 2) if total else 0.0
        return Result.success(
            TodoStatsDTO(
                total_count=total,
                completed_count=completed,
                pending_count=pending,
                completion_rate=rate,
            )
        )
