"""Loading helpers shared by the todo handlers."""

from officeops.domain.entities.todo import Todo
from officeops.domain.exceptions import DomainValidationError, EntityNotFoundError
from officeops.domain.ports.repositories import TodoRepository
from officeops.domain.value_objects import TodoId, UserId

NOT_FOUND_MESSAGE = "Todo not found or access denied"


def parse_user_id(raw: str) -> UserId:
    result = UserId.create(raw)
    if result.is_failure:
        raise DomainValidationError(result.error, "user_id")
    return result.value


async def load_todo_for_user(
    todo_repository: TodoRepository, todo_id: int, user_id: UserId
) -> Todo:
    """Missing, soft-deleted and foreign todos all look the same: not found."""
    if isinstance(todo_id, bool) or not isinstance(todo_id, int) or todo_id < 1:
        raise EntityNotFoundError(NOT_FOUND_MESSAGE)

    todo = await todo_repository.get_by_id_for_user(TodoId(todo_id), user_id)
    if todo is None:
        raise EntityNotFoundError(NOT_FOUND_MESSAGE)
    return todo
