"""
Create Todo Command.

Guidelines:
- Command: @dataclass(frozen=True) holding raw input data
- Handler: receives repository and unit of work via __init__ (DI)
- Handler.execute(): builds value objects, creates the aggregate, saves it

Steps:
1. TodoTitle.create / TodoDescription.create / UserId.create (Result, no raise)
2. Todo.create(...) records TodoCreated
3. Register with the unit of work and save_changes()
   → state persisted (id assigned), TodoCreated dispatched, log cleared
4. Return TodoDTO
"""

from dataclasses import dataclass
from typing import Optional

from officeops.application.common.interfaces import Command, CommandHandler
from officeops.application.common.unit_of_work import UnitOfWork
from officeops.application.dto.todo import TodoDTO
from officeops.domain.common.result import Result
from officeops.domain.entities.todo import Todo
from officeops.domain.ports.repositories import TodoRepository
from officeops.domain.value_objects import TodoDescription, TodoTitle, UserId


@dataclass(frozen=True)
class CreateTodoCommand(Command[TodoDTO]):
    user_id: str
    title: str
    description: Optional[str] = None


class CreateTodoHandler(CommandHandler[CreateTodoCommand, TodoDTO]):
    request_type = CreateTodoCommand
    action = "create todo"

    def __init__(self, todo_repository: TodoRepository, uow: UnitOfWork):
        self._todo_repository = todo_repository
        self._uow = uow

    async def execute(self, command: CreateTodoCommand) -> Result[TodoDTO]:
        user_id = UserId.create(command.user_id)
        if user_id.is_failure:
            return Result.failure(user_id.error)
        title = TodoTitle.create(command.title)
        if title.is_failure:
            return Result.failure(title.error)
        description = TodoDescription.create(command.description)
        if description.is_failure:
            return Result.failure(description.error)

        todo = Todo.create(title.value, description.value, user_id.value)

        self._uow.register(todo, self._todo_repository)
        saved = await self._uow.save_changes()
        if saved.is_failure:
            return Result.failure(f"Failed to {self.action}: {saved.error}", saved.error_type)

        return Result.success(TodoDTO.from_entity(todo))
