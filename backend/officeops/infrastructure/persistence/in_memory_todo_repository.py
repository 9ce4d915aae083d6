"""
In-memory Todo Repository Implementation.

Mapping:
- TodoRecord fields: primitives (int, str, datetime)
- Domain aggregate: Todo with value objects (TodoId, TodoTitle, UserId, ...)
- Records are rebuilt into aggregates through Todo.rehydrate (no events)
"""

from typing import Optional

from officeops.domain.entities.todo import Todo
from officeops.domain.ports.repositories import TodoRepository
from officeops.domain.value_objects import TodoDescription, TodoId, TodoTitle, UserId
from officeops.infrastructure.persistence.in_memory_database import (
    InMemoryDatabase,
    TodoRecord,
)

TODOS_TABLE = "todos"


class InMemoryTodoRepository(TodoRepository):
    _database: InMemoryDatabase

    def __init__(self, database: InMemoryDatabase):
        self._database = database

    def _to_entity(self, record: TodoRecord) -> Todo:
        """Map stored record to domain aggregate."""
        return Todo.rehydrate(
            id=TodoId(record.id),
            title=TodoTitle(record.title),
            description=(
                TodoDescription(record.description)
                if record.description is not None
                else None
            ),
            created_by=UserId(record.user_id),
            created_at=record.created_at,
            is_completed=record.is_completed,
            completed_at=record.completed_at,
            modified_at=record.modified_at,
            modified_by=UserId(record.modified_by) if record.modified_by else None,
            is_deleted=record.is_deleted,
            deleted_at=record.deleted_at,
            deleted_by=UserId(record.deleted_by) if record.deleted_by else None,
        )

    def _to_record(self, todo: Todo) -> TodoRecord:
        return TodoRecord(
            id=todo.id.value,
            user_id=todo.user_id.value,
            title=todo.title.value,
            description=todo.description.value if todo.description is not None else None,
            is_completed=todo.is_completed,
            completed_at=todo.completed_at,
            created_at=todo.created_at,
            modified_at=todo.modified_at,
            modified_by=todo.modified_by.value if todo.modified_by else None,
            is_deleted=todo.is_deleted,
            deleted_at=todo.deleted_at,
            deleted_by=todo.deleted_by.value if todo.deleted_by else None,
        )

    def _visible_for(self, user_id: UserId) -> list[TodoRecord]:
        records = [
            r
            for r in self._database.todos.values()
            if r.user_id == user_id.value and not r.is_deleted
        ]
        return sorted(records, key=lambda r: (r.created_at, r.id), reverse=True)

    async def get_by_id(self, todo_id: TodoId) -> Optional[Todo]:
        record = self._database.todos.get(todo_id.value)
        if record is None or record.is_deleted:
            return None
        return self._to_entity(record)

    async def get_by_id_for_user(
        self, todo_id: TodoId, user_id: UserId
    ) -> Optional[Todo]:
        todo = await self.get_by_id(todo_id)
        if todo is None or todo.user_id != user_id:
            return None
        return todo

    async def get_all_for_user(self, user_id: UserId) -> list[Todo]:
        return [self._to_entity(r) for r in self._visible_for(user_id)]

    async def get_completed_for_user(self, user_id: UserId) -> list[Todo]:
        records = [r for r in self._visible_for(user_id) if r.is_completed]
        records.sort(key=lambda r: (r.completed_at, r.id), reverse=True)
        return [self._to_entity(r) for r in records]

    async def get_pending_for_user(self, user_id: UserId) -> list[Todo]:
        return [self._to_entity(r) for r in self._visible_for(user_id) if not r.is_completed]

    async def get_paged_for_user(
        self, user_id: UserId, page: int, page_size: int
    ) -> tuple[list[Todo], int]:
        records = self._visible_for(user_id)
        start = (page - 1) * page_size
        page_records = records[start : start + page_size]
        return [self._to_entity(r) for r in page_records], len(records)

    async def count_for_user(self, user_id: UserId) -> int:
        return len(self._visible_for(user_id))

    async def count_completed_for_user(self, user_id: UserId) -> int:
        return sum(1 for r in self._visible_for(user_id) if r.is_completed)

    async def count_pending_for_user(self, user_id: UserId) -> int:
        return sum(1 for r in self._visible_for(user_id) if not r.is_completed)

    async def exists(self, todo_id: TodoId) -> bool:
        record = self._database.todos.get(todo_id.value)
        return record is not None and not record.is_deleted

    async def save(self, todo: Todo) -> None:
        """Insert (assigning an id) or update."""
        if not todo.id.is_assigned:
            todo.assign_id(TodoId(self._database.next_id(TODOS_TABLE)))
        self._database.todos[todo.id.value] = self._to_record(todo)
