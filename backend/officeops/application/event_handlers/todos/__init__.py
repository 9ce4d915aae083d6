"""Todo event listeners."""

from officeops.application.event_handlers.todos.todo_logging import (
    TODO_LOGGING_LISTENERS,
    on_todo_completed,
    on_todo_created,
    on_todo_deleted,
    on_todo_reopened,
    on_todo_updated,
)

__all__ = [
    "TODO_LOGGING_LISTENERS",
    "on_todo_completed",
    "on_todo_created",
    "on_todo_deleted",
    "on_todo_reopened",
    "on_todo_updated",
]
