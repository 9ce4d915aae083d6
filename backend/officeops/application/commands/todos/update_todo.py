"""
Update Todo Command.

Title and description are replaced together (one TodoUpdated at most).
When is_completed is given, the todo is completed or reopened as well; each
of those records its own event only if the state actually changes. All
mutations are saved in one explicit transaction.
"""

from dataclasses import dataclass
from typing import Optional

from officeops.application.commands.todos.loading import load_todo_for_user, parse_user_id
from officeops.application.common.interfaces import Command, CommandHandler
from officeops.application.common.unit_of_work import UnitOfWork
from officeops.application.dto.todo import TodoDTO
from officeops.domain.common.result import Result
from officeops.domain.ports.repositories import TodoRepository
from officeops.domain.value_objects import TodoDescription, TodoTitle


@dataclass(frozen=True)
class UpdateTodoCommand(Command[TodoDTO]):
    todo_id: int
    user_id: str
    title: str
    description: Optional[str] = None
    is_completed: Optional[bool] = None


class UpdateTodoHandler(CommandHandler[UpdateTodoCommand, TodoDTO]):
    request_type = UpdateTodoCommand
    action = "update todo"

    def __init__(self, todo_repository: TodoRepository, uow: UnitOfWork):
        self._todo_repository = todo_repository
        self._uow = uow

    async def execute(self, command: UpdateTodoCommand) -> Result[TodoDTO]:
        user_id = parse_user_id(command.user_id)

        # validate before loading so a bad request never touches the aggregate
        title = TodoTitle.create(command.title)
        if title.is_failure:
            return Result.failure(title.error)
        description = TodoDescription.create(command.description)
        if description.is_failure:
            return Result.failure(description.error)

        todo = await load_todo_for_user(self._todo_repository, command.todo_id, user_id)

        async with self._uow:
            todo.update(title.value, description.value, user_id)
            if command.is_completed is True:
                todo.complete(user_id)
            elif command.is_completed is False:
                todo.reopen(user_id)

            self._uow.register(todo, self._todo_repository)
            committed = await self._uow.commit()

        if committed.is_failure:
            return Result.failure(
                f"Failed to {self.action}: {committed.error}", committed.error_type
            )
        return Result.success(TodoDTO.from_entity(todo))
