"""
Unit of Work - one transaction boundary around "persist state" and
"dispatch the events that state change produced".

States:
    IDLE ──begin_transaction()──▶ IN_TRANSACTION ──commit()───▶ COMMITTED
                                        │
                                        └──────rollback()──▶ ROLLED_BACK

commit() steps, in order:
    1. save every registered aggregate through its repository
    2. collect pending events (registration order, recording order kept)
    3. dispatch them (in-transaction, before the store commit)
    4. commit the underlying transaction
    5. clear each aggregate's event log

Any failure in 1-4 rolls the transaction back and leaves every event log
untouched, so nothing is lost and nothing is counted as dispatched.
save_changes() runs the same steps as an implicit single-operation
transaction and returns the unit of work to IDLE. Inside an explicit
transaction it only persists; a persistence failure there rolls the
transaction back and closes the unit of work.

Usage:
    uow.register(todo, todo_repository)
    result = await uow.save_changes()

    async with uow:                     # begin_transaction()
        uow.register(todo, todo_repository)
        result = await uow.commit()     # rolled back on exit if not committed
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Protocol

from officeops.application.common.errors import InvalidOperationError
from officeops.application.common.event_dispatcher import DomainEventDispatcher
from officeops.domain.common.aggregate_root import AggregateRoot
from officeops.domain.common.domain_event import DomainEvent
from officeops.domain.common.result import ErrorType, Result
from officeops.domain.exceptions import PersistenceError
from officeops.domain.ports.transaction import TransactionPort

logger = logging.getLogger(__name__)


class AggregateRepository(Protocol):
    async def save(self, aggregate: Any) -> None: ...


class UnitOfWorkState(str, Enum):
    IDLE = "idle"
    IN_TRANSACTION = "in_transaction"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class UnitOfWork:
    def __init__(
        self,
        transaction: TransactionPort,
        dispatcher: DomainEventDispatcher,
    ):
        self._transaction = transaction
        self._dispatcher = dispatcher
        self._tracked: list[tuple[AggregateRoot, AggregateRepository]] = []
        self._state = UnitOfWorkState.IDLE

    @property
    def state(self) -> UnitOfWorkState:
        return self._state

    @property
    def tracked(self) -> tuple[AggregateRoot, ...]:
        return tuple(aggregate for aggregate, _ in self._tracked)

    def register(self, aggregate: AggregateRoot, repository: AggregateRepository) -> None:
        """Track a touched aggregate together with the repository that saves it."""
        self._ensure_not_closed()
        if any(tracked is aggregate for tracked, _ in self._tracked):
            return
        self._tracked.append((aggregate, repository))

    # ==================== EXPLICIT TRANSACTION ====================

    async def begin_transaction(self) -> None:
        if self._state is UnitOfWorkState.IN_TRANSACTION:
            raise InvalidOperationError("A transaction is already in progress.")
        self._ensure_not_closed()

        await self._transaction.begin()
        self._state = UnitOfWorkState.IN_TRANSACTION

    async def commit(self) -> Result[None]:
        if self._state is not UnitOfWorkState.IN_TRANSACTION:
            raise InvalidOperationError("No transaction is in progress.")
        return await self._complete()

    async def rollback(self) -> None:
        if self._state is not UnitOfWorkState.IN_TRANSACTION:
            raise InvalidOperationError("No transaction is in progress.")
        try:
            await self._transaction.rollback()
        finally:
            self._state = UnitOfWorkState.ROLLED_BACK

    async def __aenter__(self) -> "UnitOfWork":
        await self.begin_transaction()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if self._state is not UnitOfWorkState.IN_TRANSACTION:
            return False
        if exc_type is None:
            await self.rollback()
            return False

        try:
            await self.rollback()
        except Exception:
            # the exception leaving the block is what the caller sees
            logger.exception("Rollback failed")
        return False

    # ==================== IMPLICIT TRANSACTION ====================

    async def save_changes(self) -> Result[None]:
        """
        Persist, dispatch and clear as one implicit transaction.

        Inside an explicit transaction this only writes aggregate state;
        events stay pending until commit().
        """
        if self._state is UnitOfWorkState.IN_TRANSACTION:
            try:
                await self._persist()
            except PersistenceError as e:
                logger.error("Persistence failed; rolling back: %s", e.message)
                await self._abort()
                return Result.fail(
                    f"Failed to persist changes: {e.message}", ErrorType.PERSISTENCE
                )
            return Result.ok()

        self._ensure_not_closed()
        try:
            await self._transaction.begin()
        except PersistenceError as e:
            return Result.fail(
                f"Failed to begin transaction: {e.message}", ErrorType.PERSISTENCE
            )
        self._state = UnitOfWorkState.IN_TRANSACTION

        try:
            return await self._complete()
        finally:
            self._state = UnitOfWorkState.IDLE

    # ==================== INTERNALS ====================

    async def _complete(self) -> Result[None]:
        try:
            await self._persist()

            events = self._pending_events()
            dispatched = await self._dispatcher.dispatch(events)
            if dispatched.is_failure:
                await self._abort()
                return dispatched

            await self._transaction.commit()
        except asyncio.CancelledError:
            logger.warning("Unit of work cancelled; rolling back")
            await self._abort()
            raise
        except PersistenceError as e:
            logger.error("Persistence failed; rolling back: %s", e.message)
            await self._abort()
            return Result.fail(
                f"Failed to persist changes: {e.message}", ErrorType.PERSISTENCE
            )
        except Exception as e:
            logger.exception("Unit of work failed; rolling back")
            await self._abort()
            return Result.fail(f"Failed to save changes: {e}", ErrorType.UNEXPECTED)

        self._state = UnitOfWorkState.COMMITTED
        for aggregate, _ in self._tracked:
            aggregate.clear_domain_events()
        logger.debug(
            "Committed %d aggregate(s), %d event(s)", len(self._tracked), len(events)
        )
        return Result.ok()

    async def _persist(self) -> None:
        for aggregate, repository in self._tracked:
            await repository.save(aggregate)

    def _pending_events(self) -> list[DomainEvent]:
        return [
            event for aggregate, _ in self._tracked for event in aggregate.domain_events
        ]

    async def _abort(self) -> None:
        self._state = UnitOfWorkState.ROLLED_BACK
        if not self._transaction.is_active:
            return
        try:
            await self._transaction.rollback()
        except Exception:
            # the original failure is what the caller sees
            logger.exception("Rollback failed")

    def _ensure_not_closed(self) -> None:
        if self._state in (UnitOfWorkState.COMMITTED, UnitOfWorkState.ROLLED_BACK):
            raise InvalidOperationError(
                f"Unit of work is closed ({self._state.value})"
            )
