"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value)
- Is immutable (frozen dataclass)
- Validates itself on creation (raises DomainValidationError)
- Offers create(), which returns a Result instead of raising
"""

from officeops.domain.value_objects.todo_description import TodoDescription
from officeops.domain.value_objects.todo_id import TodoId
from officeops.domain.value_objects.todo_title import TodoTitle
from officeops.domain.value_objects.user_id import UserId

__all__ = [
    "TodoDescription",
    "TodoId",
    "TodoTitle",
    "UserId",
]
