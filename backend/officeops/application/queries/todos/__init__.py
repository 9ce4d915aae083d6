"""Todo queries."""

from officeops.application.queries.todos.get_todo_by_id import (
    GetTodoByIdHandler,
    GetTodoByIdQuery,
)
from officeops.application.queries.todos.get_todo_stats import (
    GetTodoStatsHandler,
    GetTodoStatsQuery,
)
from officeops.application.queries.todos.list_todos import (
    GetAllTodosHandler,
    GetAllTodosQuery,
    GetCompletedTodosHandler,
    GetCompletedTodosQuery,
    GetPagedTodosHandler,
    GetPagedTodosQuery,
    GetPendingTodosHandler,
    GetPendingTodosQuery,
)

__all__ = [
    "GetAllTodosHandler",
    "GetAllTodosQuery",
    "GetCompletedTodosHandler",
    "GetCompletedTodosQuery",
    "GetPagedTodosHandler",
    "GetPagedTodosQuery",
    "GetPendingTodosHandler",
    "GetPendingTodosQuery",
    "GetTodoByIdHandler",
    "GetTodoByIdQuery",
    "GetTodoStatsHandler",
    "GetTodoStatsQuery",
]
