"""
Todo Repository Port - Interface for todo persistence.
Implementation: officeops/infrastructure/persistence/in_memory_todo_repository.py

Soft-deleted todos are invisible to every read method.
save() inserts when the todo has no identity yet (and assigns one) or
updates the stored state otherwise. It raises PersistenceError when the store
rejects the write.
"""

from abc import ABC, abstractmethod
from typing import Optional

from officeops.domain.entities.todo import Todo
from officeops.domain.value_objects.todo_id import TodoId
from officeops.domain.value_objects.user_id import UserId


class TodoRepository(ABC):
    @abstractmethod
    async def get_by_id(self, todo_id: TodoId) -> Optional[Todo]: ...

    @abstractmethod
    async def get_by_id_for_user(
        self, todo_id: TodoId, user_id: UserId
    ) -> Optional[Todo]: ...

    @abstractmethod
    async def get_all_for_user(self, user_id: UserId) -> list[Todo]: ...

    @abstractmethod
    async def get_completed_for_user(self, user_id: UserId) -> list[Todo]: ...

    @abstractmethod
    async def get_pending_for_user(self, user_id: UserId) -> list[Todo]: ...

    @abstractmethod
    async def get_paged_for_user(
        self, user_id: UserId, page: int, page_size: int
    ) -> tuple[list[Todo], int]: ...

    @abstractmethod
    async def count_for_user(self, user_id: UserId) -> int: ...

    @abstractmethod
    async def count_completed_for_user(self, user_id: UserId) -> int: ...

    @abstractmethod
    async def count_pending_for_user(self, user_id: UserId) -> int: ...

    @abstractmethod
    async def exists(self, todo_id: TodoId) -> bool: ...

    @abstractmethod
    async def save(self, todo: Todo) -> None: ...
