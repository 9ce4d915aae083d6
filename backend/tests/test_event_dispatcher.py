"""Domain event dispatcher: routing, ordering, fan-out and failure reporting."""

import asyncio

import pytest

from conftest import SpyListener
from officeops.application.common.errors import ConfigurationError
from officeops.application.common.event_dispatcher import (
    DomainEventDispatcher,
    ListenerRegistry,
)
from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.common.result import ErrorType
from officeops.domain.events import TodoCompleted, TodoCreated, TodoReopened
from officeops.setup.ioc.registrations import build_listener_registry


def dispatcher_for(bindings):
    return DomainEventDispatcher(build_listener_registry(bindings))


async def test_routes_only_to_listeners_of_the_concrete_type(make_todo):
    created, completed = SpyListener("created"), SpyListener("completed")
    dispatcher = dispatcher_for({TodoCreated: [created], TodoCompleted: [completed]})

    result = await dispatcher.dispatch(make_todo().domain_events)

    assert result.is_success
    assert len(created.events) == 1
    assert completed.events == []


async def test_batch_is_delivered_in_recording_order(make_todo, user_id):
    log = []
    spy = SpyListener("spy", log)
    todo = make_todo()
    todo.complete(user_id)
    todo.reopen(user_id)
    dispatcher = dispatcher_for(
        {TodoCreated: [spy], TodoCompleted: [spy], TodoReopened: [spy]}
    )

    await dispatcher.dispatch(todo.domain_events)

    assert [type(e) for e in spy.events] == [TodoCreated, TodoCompleted, TodoReopened]


async def test_single_event_is_accepted(make_todo):
    spy = SpyListener()
    event = make_todo().domain_events[0]

    result = await dispatcher_for({TodoCreated: [spy]}).dispatch(event)

    assert result.is_success
    assert spy.events == [event]


async def test_event_without_listeners_succeeds(make_todo):
    result = await dispatcher_for({}).dispatch(make_todo().domain_events)

    assert result.is_success


async def test_empty_batch_succeeds():
    assert (await dispatcher_for({}).dispatch([])).is_success


async def test_listeners_of_one_event_run_concurrently(make_todo):
    both_started = asyncio.Event()
    started = []

    async def first(event):
        started.append("first")
        await asyncio.wait_for(both_started.wait(), timeout=1)

    async def second(event):
        started.append("second")
        both_started.set()

    result = await dispatcher_for({TodoCreated: [first, second]}).dispatch(
        make_todo().domain_events
    )

    assert result.is_success
    assert started == ["first", "second"]


async def test_failing_listener_does_not_stop_its_siblings(make_todo):
    log = []
    failing = SpyListener("failing", log, fail=True)
    healthy = SpyListener("healthy", log)

    result = await dispatcher_for({TodoCreated: [failing, healthy]}).dispatch(
        make_todo().domain_events
    )

    assert result.is_failure
    assert result.error_type is ErrorType.DISPATCH
    assert "TodoCreated" in result.error
    assert "failing failed" in result.error
    assert len(healthy.events) == 1


async def test_failure_stops_before_the_next_event(make_todo, user_id):
    todo = make_todo()
    todo.complete(user_id)
    later = SpyListener("later")
    dispatcher = dispatcher_for(
        {TodoCreated: [SpyListener("boom", fail=True)], TodoCompleted: [later]}
    )

    result = await dispatcher.dispatch(todo.domain_events)

    assert result.is_failure
    assert later.events == []


async def test_cancellation_propagates(make_todo):
    async def cancelled(event):
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await dispatcher_for({TodoCreated: [cancelled]}).dispatch(
            make_todo().domain_events
        )


class TestListenerRegistry:
    def test_rejects_unknown_event_types(self):
        class Stray(DomainEvent):
            pass

        with pytest.raises(ConfigurationError, match="Stray"):
            build_listener_registry({Stray: [SpyListener()]})

    def test_rejects_non_callables(self):
        with pytest.raises(ConfigurationError, match="not callable"):
            ListenerRegistry({TodoCreated: ["nope"]}, known_events=[TodoCreated])

    def test_duplicate_registrations_collapse(self):
        spy = SpyListener()
        registry = ListenerRegistry(
            {TodoCreated: [spy, spy]}, known_events=[TodoCreated]
        )

        assert registry.listeners_for(TodoCreated) == (spy,)

    def test_unbound_type_has_no_listeners(self):
        registry = ListenerRegistry({}, known_events=[TodoCreated])

        assert registry.listeners_for(TodoCreated) == ()


async def test_both_completed_listeners_run_when_one_throws(make_todo, user_id):
    todo = make_todo()
    todo.clear_domain_events()
    todo.complete(user_id)
    notifier = SpyListener("notifier", fail=True)
    audit = SpyListener("audit")

    result = await dispatcher_for({TodoCompleted: [notifier, audit]}).dispatch(
        todo.domain_events
    )

    assert result.is_failure
    assert len(notifier.events) == 1
    assert len(audit.events) == 1
