"""
Todo Aggregate Root - a single task owned by a user.

Business methods follow the no-op policy: when a call would not change
observable state (completing a completed todo, setting an identical title)
nothing is modified and no event is recorded.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from officeops.domain.common.aggregate_root import AggregateRoot
from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.events.todo_events import (
    TodoCompleted,
    TodoCreated,
    TodoDeleted,
    TodoReopened,
    TodoUpdated,
)
from officeops.domain.value_objects.todo_description import TodoDescription
from officeops.domain.value_objects.todo_id import TodoId
from officeops.domain.value_objects.todo_title import TodoTitle
from officeops.domain.value_objects.user_id import UserId


class Todo(AggregateRoot[TodoId]):
    def __init__(
        self,
        id: TodoId,
        title: TodoTitle,
        description: Optional[TodoDescription],
        created_by: UserId,
        created_at: datetime,
        is_completed: bool = False,
        completed_at: Optional[datetime] = None,
        modified_at: Optional[datetime] = None,
        modified_by: Optional[UserId] = None,
        is_deleted: bool = False,
        deleted_at: Optional[datetime] = None,
        deleted_by: Optional[UserId] = None,
    ):
        super().__init__(id)
        self._title = title
        self._description = description
        self._created_by = created_by
        self._created_at = created_at
        self._is_completed = is_completed
        self._completed_at = completed_at
        self._modified_at = modified_at
        self._modified_by = modified_by
        self._is_deleted = is_deleted
        self._deleted_at = deleted_at
        self._deleted_by = deleted_by

    # ==================== FACTORIES ====================

    @classmethod
    def create(
        cls,
        title: TodoTitle,
        description: Optional[TodoDescription],
        user_id: UserId,
    ) -> Todo:
        """Create a new, unpersisted todo and record TodoCreated."""
        todo = cls(
            id=TodoId.unassigned(),
            title=title,
            description=description,
            created_by=user_id,
            created_at=datetime.now(timezone.utc),
        )
        todo._record_event(TodoCreated(todo.id, user_id, title, description))
        return todo

    @classmethod
    def rehydrate(cls, **state) -> Todo:
        """Rebuild a persisted todo from stored state. Records no events."""
        if not state["id"].is_assigned:
            raise ValueError("Cannot rehydrate a todo without a persisted id")
        return cls(**state)

    # ==================== STATE ====================

    @property
    def title(self) -> TodoTitle:
        return self._title

    @property
    def description(self) -> Optional[TodoDescription]:
        return self._description

    @property
    def is_completed(self) -> bool:
        return self._is_completed

    @property
    def completed_at(self) -> Optional[datetime]:
        return self._completed_at

    @property
    def user_id(self) -> UserId:
        return self._created_by

    @property
    def created_by(self) -> UserId:
        return self._created_by

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def modified_at(self) -> Optional[datetime]:
        return self._modified_at

    @property
    def modified_by(self) -> Optional[UserId]:
        return self._modified_by

    @property
    def is_deleted(self) -> bool:
        return self._is_deleted

    @property
    def deleted_at(self) -> Optional[datetime]:
        return self._deleted_at

    @property
    def deleted_by(self) -> Optional[UserId]:
        return self._deleted_by

    # ==================== BUSINESS METHODS ====================

    def update_title(self, new_title: TodoTitle, user_id: UserId) -> None:
        if self._title == new_title:
            return

        self._title = new_title
        self._touch(user_id)
        self._record_event(
            TodoUpdated(self.id, user_id, self._title, self._description)
        )

    def update_description(
        self, new_description: Optional[TodoDescription], user_id: UserId
    ) -> None:
        if self._description == new_description:
            return

        self._description = new_description
        self._touch(user_id)
        self._record_event(
            TodoUpdated(self.id, user_id, self._title, self._description)
        )

    def update(
        self,
        title: TodoTitle,
        description: Optional[TodoDescription],
        user_id: UserId,
    ) -> None:
        """Replace title and description together; one event at most."""
        if self._title == title and self._description == description:
            return

        self._title = title
        self._description = description
        self._touch(user_id)
        self._record_event(
            TodoUpdated(self.id, user_id, self._title, self._description)
        )

    def complete(self, user_id: UserId) -> None:
        if self._is_completed:
            return

        now = datetime.now(timezone.utc)
        self._is_completed = True
        self._completed_at = now
        self._touch(user_id, now)
        self._record_event(TodoCompleted(self.id, user_id, self._title, now))

    def reopen(self, user_id: UserId) -> None:
        if not self._is_completed:
            return

        self._is_completed = False
        self._completed_at = None
        self._touch(user_id)
        self._record_event(TodoReopened(self.id, user_id, self._title))

    def delete(self, user_id: UserId) -> None:
        """Soft delete."""
        if self._is_deleted:
            return

        self._is_deleted = True
        self._deleted_at = datetime.now(timezone.utc)
        self._deleted_by = user_id
        self._record_event(TodoDeleted(self.id, user_id, self._title))

    def _touch(self, user_id: UserId, at: Optional[datetime] = None) -> None:
        self._modified_at = at or datetime.now(timezone.utc)
        self._modified_by = user_id

    def _with_identity(self, event: DomainEvent) -> DomainEvent:
        if getattr(event, "todo_id", self.id).is_assigned:
            return event
        return replace(event, todo_id=self.id)
