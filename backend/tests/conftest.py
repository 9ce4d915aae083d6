"""Root conftest - shared fixtures for the aggregate pipeline tests."""

import os

os.environ.setdefault("OFFICEOPS_ENV", "testing")

import pytest
from fastapi.testclient import TestClient

from officeops.application.common.event_dispatcher import DomainEventDispatcher
from officeops.application.common.unit_of_work import UnitOfWork
from officeops.domain.entities.todo import Todo
from officeops.domain.exceptions import PersistenceError
from officeops.domain.value_objects import TodoDescription, TodoTitle, UserId
from officeops.fastapi_app import create_fastapi_app
from officeops.infrastructure.persistence import (
    InMemoryDatabase,
    InMemoryTodoRepository,
    InMemoryTransaction,
)
from officeops.setup.ioc.container import AppProvider, create_container
from officeops.setup.ioc.registrations import build_listener_registry


class SpyListener:
    """Records every event it receives, in arrival order."""

    def __init__(self, name: str = "spy", log: list | None = None, fail: bool = False):
        self.__qualname__ = name
        self.name = name
        self.log = log if log is not None else []
        self.fail = fail

    async def __call__(self, event):
        self.log.append((self.name, event))
        if self.fail:
            raise RuntimeError(f"{self.name} failed")

    @property
    def events(self) -> list:
        return [event for name, event in self.log if name == self.name]


class FailingTodoRepository(InMemoryTodoRepository):
    """Repository whose store rejects every write after the first succeed_first."""

    def __init__(
        self,
        database: InMemoryDatabase,
        message: str = "disk full",
        succeed_first: int = 0,
    ):
        super().__init__(database)
        self.message = message
        self.succeed_first = succeed_first
        self.save_calls = 0

    async def save(self, todo: Todo) -> None:
        self.save_calls += 1
        if self.save_calls <= self.succeed_first:
            await super().save(todo)
            return
        raise PersistenceError(self.message)


class BrokenRollbackTransaction(InMemoryTransaction):
    """Transaction whose rollback releases the store, then reports a failure."""

    async def rollback(self) -> None:
        await super().rollback()
        raise PersistenceError("connection lost during rollback")


@pytest.fixture()
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture()
def repository(database) -> InMemoryTodoRepository:
    return InMemoryTodoRepository(database)


@pytest.fixture()
def user_id() -> UserId:
    return UserId("user-1")


@pytest.fixture()
def make_todo(user_id):
    def _make(title: str = "Buy milk", description: str | None = None) -> Todo:
        return Todo.create(
            TodoTitle(title),
            TodoDescription(description) if description else None,
            user_id,
        )

    return _make


@pytest.fixture()
def make_uow(database):
    """Build a unit of work over the test store with the given listener bindings."""

    def _make(bindings: dict | None = None) -> UnitOfWork:
        dispatcher = DomainEventDispatcher(build_listener_registry(bindings or {}))
        return UnitOfWork(InMemoryTransaction(database), dispatcher)

    return _make


@pytest.fixture()
def container(database):
    return create_container(AppProvider(database=database))


@pytest.fixture()
def app(container):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(container, configure_logging=False)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs the lifespan)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    return {"X-User-Id": "user-1"}
