"""
Domain Event Dispatcher - fans domain events out to the listeners registered
for each event's concrete type.

Ordering:
- A batch is dispatched in recording order, one event at a time.
- All listeners of one event run concurrently; every listener is awaited even
  when a sibling fails.
- If any listener of an event fails, dispatch stops before the next event and
  a DISPATCH failure is returned. Events already delivered stay delivered.

Listeners are plain async callables taking the event. Zero listeners for an
event type is valid.
"""

import asyncio
import logging
from types import MappingProxyType
from typing import Awaitable, Callable, Iterable, Mapping, Union

from officeops.application.common.errors import ConfigurationError
from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.common.result import ErrorType, Result

logger = logging.getLogger(__name__)

Listener = Callable[[DomainEvent], Awaitable[None]]


async def _invoke(listener: Listener, event: DomainEvent) -> None:
    await listener(event)


def _listener_name(listener: Listener) -> str:
    return getattr(listener, "__qualname__", None) or type(listener).__name__


class ListenerRegistry:
    """Immutable event type → ordered listeners map, checked against a closed event set."""

    def __init__(
        self,
        bindings: Mapping[type[DomainEvent], Iterable[Listener]],
        known_events: Iterable[type[DomainEvent]],
    ):
        known = frozenset(known_events)
        unknown = [t.__name__ for t in bindings if t not in known]
        if unknown:
            raise ConfigurationError(
                f"Listeners bound to unknown event types: {', '.join(sorted(unknown))}"
            )

        listeners: dict[type[DomainEvent], tuple[Listener, ...]] = {}
        for event_type, event_listeners in bindings.items():
            ordered = tuple(dict.fromkeys(event_listeners))
            for listener in ordered:
                if not callable(listener):
                    raise ConfigurationError(
                        f"Listener {listener!r} for {event_type.__name__} is not callable"
                    )
            listeners[event_type] = ordered

        self._known = known
        self._listeners: Mapping[type[DomainEvent], tuple[Listener, ...]] = (
            MappingProxyType(listeners)
        )

    @property
    def known_events(self) -> frozenset[type[DomainEvent]]:
        return self._known

    def listeners_for(self, event_type: type[DomainEvent]) -> tuple[Listener, ...]:
        return self._listeners.get(event_type, ())


class DomainEventDispatcher:
    def __init__(self, registry: ListenerRegistry):
        self._registry = registry

    async def dispatch(
        self, events: Union[DomainEvent, Iterable[DomainEvent]]
    ) -> Result[None]:
        batch = [events] if isinstance(events, DomainEvent) else list(events)
        if not batch:
            return Result.ok()

        logger.info("Dispatching %d domain event(s)", len(batch))
        for event in batch:
            result = await self._dispatch_one(event)
            if result.is_failure:
                return result

        logger.info("Successfully dispatched %d domain event(s)", len(batch))
        return Result.ok()

    async def _dispatch_one(self, event: DomainEvent) -> Result[None]:
        listeners = self._registry.listeners_for(type(event))
        if not listeners:
            logger.debug("No listeners for %s", event.event_type)
            return Result.ok()

        outcomes = await asyncio.gather(
            *(_invoke(listener, event) for listener in listeners),
            return_exceptions=True,
        )

        errors: list[str] = []
        for listener, outcome in zip(listeners, outcomes):
            if not isinstance(outcome, BaseException):
                continue
            if not isinstance(outcome, Exception):
                # cancellation and interpreter exits are not listener failures
                raise outcome
            logger.error(
                "Listener %s failed for %s",
                _listener_name(listener),
                event.event_type,
                exc_info=outcome,
            )
            errors.append(f"{_listener_name(listener)}: {outcome}")

        if errors:
            return Result.failure(
                f"Failed to dispatch {event.event_type}: {'; '.join(errors)}",
                ErrorType.DISPATCH,
            )
        return Result.ok()
