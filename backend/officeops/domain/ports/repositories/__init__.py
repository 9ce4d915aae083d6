"""
REPOSITORY PORTS - Aggregate persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Loads aggregates by identity and saves them
- Does NOT specify implementation (SQL, document store, in-memory, ...)
"""

from officeops.domain.ports.repositories.todo_repository import TodoRepository

__all__ = [
    "TodoRepository",
]
