"""Todo commands."""

from officeops.application.commands.todos.complete_todo import (
    CompleteTodoCommand,
    CompleteTodoHandler,
)
from officeops.application.commands.todos.create_todo import (
    CreateTodoCommand,
    CreateTodoHandler,
)
from officeops.application.commands.todos.delete_todo import (
    DeleteTodoCommand,
    DeleteTodoHandler,
)
from officeops.application.commands.todos.reopen_todo import (
    ReopenTodoCommand,
    ReopenTodoHandler,
)
from officeops.application.commands.todos.update_todo import (
    UpdateTodoCommand,
    UpdateTodoHandler,
)

__all__ = [
    "CompleteTodoCommand",
    "CompleteTodoHandler",
    "CreateTodoCommand",
    "CreateTodoHandler",
    "DeleteTodoCommand",
    "DeleteTodoHandler",
    "ReopenTodoCommand",
    "ReopenTodoHandler",
    "UpdateTodoCommand",
    "UpdateTodoHandler",
]
