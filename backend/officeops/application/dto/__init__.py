"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- todo.py → TodoDTO, TodoStatsDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from officeops.application.dto.todo import TodoDTO, TodoStatsDTO

__all__ = [
    "TodoDTO",
    "TodoStatsDTO",
]
