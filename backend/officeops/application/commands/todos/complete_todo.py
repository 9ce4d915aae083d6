"""Complete Todo Command. Completing an already completed todo records nothing."""

from dataclasses import dataclass

from officeops.application.commands.todos.loading import load_todo_for_user, parse_user_id
from officeops.application.common.interfaces import Command, CommandHandler
from officeops.application.common.unit_of_work import UnitOfWork
from officeops.application.dto.todo import TodoDTO
from officeops.domain.common.result import Result
from officeops.domain.ports.repositories import TodoRepository


@dataclass(frozen=True)
class CompleteTodoCommand(Command[TodoDTO]):
    todo_id: int
    user_id: str


class CompleteTodoHandler(CommandHandler[CompleteTodoCommand, TodoDTO]):
    request_type = CompleteTodoCommand
    action = "complete todo"

    def __init__(self, todo_repository: TodoRepository, uow: UnitOfWork):
        self._todo_repository = todo_repository
        self._uow = uow

    async def execute(self, command: CompleteTodoCommand) -> Result[TodoDTO]:
        user_id = parse_user_id(command.user_id)
        todo = await load_todo_for_user(self._todo_repository, command.todo_id, user_id)

        todo.complete(user_id)

        self._uow.register(todo, self._todo_repository)
        saved = await self._uow.save_changes()
        if saved.is_failure:
            return Result.failure(f"Failed to {self.action}: {saved.error}", saved.error_type)

        return Result.success(TodoDTO.from_entity(todo))
