"""Todo DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from officeops.domain.entities.todo import Todo


class TodoDTO(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    is_completed: bool
    completed_at: Optional[datetime] = None
    created_at: datetime
    modified_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoDTO":
        return cls(
            id=todo.id.value,
            title=todo.title.value,
            description=todo.description.value if todo.description else None,
            is_completed=todo.is_completed,
            completed_at=todo.completed_at,
            created_at=todo.created_at,
            modified_at=todo.modified_at,
        )


class TodoStatsDTO(BaseModel):
    total_count: int
    completed_count: int
    pending_count: int
    completion_rate: float
