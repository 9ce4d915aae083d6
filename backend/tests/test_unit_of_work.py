"""Unit of work: persist, dispatch, commit and clear as one atomic step."""

import asyncio

import pytest

from conftest import BrokenRollbackTransaction, FailingTodoRepository, SpyListener
from officeops.application.common.errors import InvalidOperationError
from officeops.application.common.event_dispatcher import DomainEventDispatcher
from officeops.application.common.unit_of_work import UnitOfWork, UnitOfWorkState
from officeops.domain.common.result import ErrorType
from officeops.domain.events import TodoCompleted, TodoCreated, TodoReopened
from officeops.domain.value_objects import TodoId
from officeops.setup.ioc.registrations import build_listener_registry


async def test_save_changes_persists_dispatches_and_clears(
    make_uow, make_todo, repository, database
):
    spy = SpyListener()
    uow = make_uow({TodoCreated: [spy]})
    todo = make_todo()

    uow.register(todo, repository)
    result = await uow.save_changes()

    assert result.is_success
    assert todo.id.is_assigned
    assert todo.id.value in database.todos
    assert [e.todo_id for e in spy.events] == [todo.id]
    assert todo.domain_events == ()
    assert uow.state is UnitOfWorkState.IDLE


async def test_events_are_dispatched_at_most_once(make_uow, make_todo, repository):
    spy = SpyListener()
    uow = make_uow({TodoCreated: [spy]})
    todo = make_todo()
    uow.register(todo, repository)

    await uow.save_changes()
    await uow.save_changes()

    assert len(spy.events) == 1


async def test_events_of_several_aggregates_keep_registration_order(
    make_uow, make_todo, repository, user_id
):
    spy = SpyListener()
    uow = make_uow({TodoCreated: [spy], TodoCompleted: [spy]})
    first, second = make_todo("first"), make_todo("second")
    second.complete(user_id)

    uow.register(second, repository)
    uow.register(first, repository)
    uow.register(second, repository)
    await uow.save_changes()

    assert [(type(e), e.title.value) for e in spy.events] == [
        (TodoCreated, "second"),
        (TodoCompleted, "second"),
        (TodoCreated, "first"),
    ]


async def test_persistence_failure_keeps_events_and_skips_dispatch(
    make_uow, make_todo, database
):
    spy = SpyListener()
    uow = make_uow({TodoCreated: [spy]})
    todo = make_todo()

    uow.register(todo, FailingTodoRepository(database))
    result = await uow.save_changes()

    assert result.is_failure
    assert result.error_type is ErrorType.PERSISTENCE
    assert "disk full" in result.error
    assert spy.events == []
    assert len(todo.domain_events) == 1
    assert database.todos == {}


async def test_dispatch_failure_rolls_back_the_store(
    make_uow, make_todo, repository, database
):
    uow = make_uow({TodoCreated: [SpyListener("audit", fail=True)]})
    todo = make_todo()

    uow.register(todo, repository)
    result = await uow.save_changes()

    assert result.is_failure
    assert result.error_type is ErrorType.DISPATCH
    assert database.todos == {}
    assert len(todo.domain_events) == 1


async def test_store_is_writable_after_a_failed_save(
    make_uow, make_todo, repository, database
):
    failing = make_uow({TodoCreated: [SpyListener("audit", fail=True)]})
    failing.register(make_todo(), repository)
    await failing.save_changes()

    uow = make_uow()
    uow.register(make_todo(), repository)

    assert (await uow.save_changes()).is_success
    assert len(database.todos) == 1


async def test_explicit_transaction_commits_once(make_uow, make_todo, repository, user_id):
    log = []
    spy = SpyListener("spy", log)
    uow = make_uow({TodoCreated: [spy], TodoCompleted: [spy], TodoReopened: [spy]})
    todo = make_todo()

    async with uow:
        uow.register(todo, repository)
        todo.complete(user_id)
        todo.reopen(user_id)
        result = await uow.commit()

    assert result.is_success
    assert uow.state is UnitOfWorkState.COMMITTED
    assert [type(e) for e in spy.events] == [TodoCreated, TodoCompleted, TodoReopened]
    assert todo.domain_events == ()


async def test_save_changes_inside_transaction_defers_dispatch(
    make_uow, make_todo, repository, database
):
    spy = SpyListener()
    uow = make_uow({TodoCreated: [spy]})
    todo = make_todo()

    await uow.begin_transaction()
    uow.register(todo, repository)
    assert (await uow.save_changes()).is_success

    assert todo.id.value in database.todos
    assert spy.events == []

    await uow.commit()
    assert len(spy.events) == 1


async def test_rollback_discards_state_and_keeps_events(
    make_uow, make_todo, repository, database
):
    uow = make_uow()
    todo = make_todo()

    await uow.begin_transaction()
    uow.register(todo, repository)
    await uow.save_changes()
    await uow.rollback()

    assert uow.state is UnitOfWorkState.ROLLED_BACK
    assert database.todos == {}
    assert len(todo.domain_events) == 1


async def test_context_exit_without_commit_rolls_back(
    make_uow, make_todo, repository, database
):
    uow = make_uow()

    with pytest.raises(RuntimeError):
        async with uow:
            uow.register(make_todo(), repository)
            await uow.save_changes()
            raise RuntimeError("caller failed")

    assert uow.state is UnitOfWorkState.ROLLED_BACK
    assert database.todos == {}


async def test_cancellation_rolls_back_and_propagates(
    make_uow, make_todo, repository, database
):
    async def cancelled(event):
        raise asyncio.CancelledError()

    uow = make_uow({TodoCreated: [cancelled]})
    todo = make_todo()
    uow.register(todo, repository)

    with pytest.raises(asyncio.CancelledError):
        await uow.save_changes()

    assert database.todos == {}
    assert len(todo.domain_events) == 1


async def test_persist_failure_inside_transaction_rolls_back(
    make_uow, make_todo, database
):
    uow = make_uow()
    repository = FailingTodoRepository(
        database, message="constraint violated", succeed_first=1
    )

    await uow.begin_transaction()
    uow.register(make_todo("first"), repository)
    uow.register(make_todo("second"), repository)
    result = await uow.save_changes()

    assert result.is_failure
    assert result.error_type is ErrorType.PERSISTENCE
    assert "constraint violated" in result.error
    assert uow.state is UnitOfWorkState.ROLLED_BACK
    assert database.todos == {}
    with pytest.raises(InvalidOperationError):
        await uow.commit()


async def test_retry_after_failed_dispatch_delivers_once(
    make_uow, make_todo, repository, database
):
    class MailerDownOnce:
        def __init__(self):
            self.calls = 0
            self.delivered = []

        async def __call__(self, event):
            self.calls += 1
            if self.calls == 1:
                raise RuntimeError("mail server down")
            self.delivered.append(event)

    mailer = MailerDownOnce()
    todo = make_todo()

    first = make_uow({TodoCreated: [mailer]})
    first.register(todo, repository)
    assert (await first.save_changes()).is_failure
    assert database.todos == {}

    retry = make_uow({TodoCreated: [mailer]})
    retry.register(todo, repository)
    result = await retry.save_changes()

    assert result.is_success
    assert list(database.todos) == [todo.id.value]
    assert todo.id == TodoId(1)
    assert [e.todo_id for e in mailer.delivered] == [todo.id]
    assert todo.domain_events == ()


async def test_failed_rollback_does_not_mask_the_callers_error(
    make_todo, repository, database
):
    uow = UnitOfWork(
        BrokenRollbackTransaction(database),
        DomainEventDispatcher(build_listener_registry({})),
    )

    with pytest.raises(RuntimeError, match="caller failed"):
        async with uow:
            uow.register(make_todo(), repository)
            await uow.save_changes()
            raise RuntimeError("caller failed")

    assert uow.state is UnitOfWorkState.ROLLED_BACK
    assert database.todos == {}


class TestStateMachine:
    async def test_begin_twice_is_rejected(self, make_uow):
        uow = make_uow()
        await uow.begin_transaction()

        with pytest.raises(InvalidOperationError, match="already in progress"):
            await uow.begin_transaction()

        await uow.rollback()

    async def test_commit_without_transaction_is_rejected(self, make_uow):
        with pytest.raises(InvalidOperationError):
            await make_uow().commit()

    async def test_rollback_without_transaction_is_rejected(self, make_uow):
        with pytest.raises(InvalidOperationError):
            await make_uow().rollback()

    async def test_closed_unit_of_work_cannot_be_reused(
        self, make_uow, make_todo, repository
    ):
        uow = make_uow()
        async with uow:
            await uow.commit()

        with pytest.raises(InvalidOperationError, match="closed"):
            uow.register(make_todo(), repository)
        with pytest.raises(InvalidOperationError):
            await uow.begin_transaction()

    def test_register_is_idempotent(self, make_uow, make_todo, repository):
        uow = make_uow()
        todo = make_todo()

        uow.register(todo, repository)
        uow.register(todo, repository)

        assert uow.tracked == (todo,)
