"""
API Routers - FastAPI endpoint definitions.
"""

from officeops.presentation.api.todos import router as todos_router

__all__ = [
    "todos_router",
]
