"""Todo event listeners that write an audit line per event."""

import logging

from officeops.domain.events import (
    TodoCompleted,
    TodoCreated,
    TodoDeleted,
    TodoReopened,
    TodoUpdated,
)

logger = logging.getLogger(__name__)


async def on_todo_created(event: TodoCreated) -> None:
    logger.info("Todo created: %s - %s", event.todo_id, event.title)


async def on_todo_updated(event: TodoUpdated) -> None:
    logger.info("Todo updated: %s - %s", event.todo_id, event.title)


async def on_todo_completed(event: TodoCompleted) -> None:
    logger.info(
        "Todo completed: %s - %s at %s",
        event.todo_id,
        event.title,
        event.completed_at.isoformat(),
    )


async def on_todo_reopened(event: TodoReopened) -> None:
    logger.info("Todo reopened: %s - %s", event.todo_id, event.title)


async def on_todo_deleted(event: TodoDeleted) -> None:
    logger.info("Todo deleted: %s - %s by %s", event.todo_id, event.title, event.user_id)


TODO_LOGGING_LISTENERS = {
    TodoCreated: [on_todo_created],
    TodoUpdated: [on_todo_updated],
    TodoCompleted: [on_todo_completed],
    TodoReopened: [on_todo_reopened],
    TodoDeleted: [on_todo_deleted],
}
