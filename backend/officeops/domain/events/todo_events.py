"""
Todo domain events.

Each event captures the todo identity, the acting user and the field values
relevant at the moment of the mutation.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union, get_args

from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.value_objects.todo_description import TodoDescription
from officeops.domain.value_objects.todo_id import TodoId
from officeops.domain.value_objects.todo_title import TodoTitle
from officeops.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class TodoCreated(DomainEvent):
    todo_id: TodoId
    user_id: UserId
    title: TodoTitle
    description: Optional[TodoDescription]


@dataclass(frozen=True)
class TodoUpdated(DomainEvent):
    todo_id: TodoId
    user_id: UserId
    title: TodoTitle
    description: Optional[TodoDescription]


@dataclass(frozen=True)
class TodoCompleted(DomainEvent):
    todo_id: TodoId
    user_id: UserId
    title: TodoTitle
    completed_at: datetime


@dataclass(frozen=True)
class TodoReopened(DomainEvent):
    todo_id: TodoId
    user_id: UserId
    title: TodoTitle


@dataclass(frozen=True)
class TodoDeleted(DomainEvent):
    todo_id: TodoId
    user_id: UserId
    title: TodoTitle


TodoEvent = Union[TodoCreated, TodoUpdated, TodoCompleted, TodoReopened, TodoDeleted]

TODO_EVENT_TYPES: tuple[type[DomainEvent], ...] = get_args(TodoEvent)
