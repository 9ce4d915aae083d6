"""
Persistence Layer - Store implementations.

Contains the in-memory store, its transaction and repository implementations
for the domain ports.
"""

from officeops.infrastructure.persistence.in_memory_database import (
    InMemoryDatabase,
    InMemoryTransaction,
    TodoRecord,
)
from officeops.infrastructure.persistence.in_memory_todo_repository import (
    InMemoryTodoRepository,
)

__all__ = [
    "InMemoryDatabase",
    "InMemoryTransaction",
    "InMemoryTodoRepository",
    "TodoRecord",
]
