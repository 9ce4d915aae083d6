"""
In-memory store with single-writer transactions.

Guidelines:
- One InMemoryDatabase per process (app-scoped), one InMemoryTransaction per
  unit of work (request-scoped).
- begin() takes the store's write lock and snapshots the tables; commit()
  drops the snapshot; rollback() restores it. Both release the lock.
- Identity sequences are not part of the snapshot: an id handed out inside a
  rolled-back transaction is never reused.
- Records are frozen, so a shallow copy of a table is a full snapshot.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from officeops.domain.exceptions import PersistenceError
from officeops.domain.ports.transaction import TransactionPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodoRecord:
    id: int
    user_id: str
    title: str
    description: Optional[str]
    is_completed: bool
    completed_at: Optional[datetime]
    created_at: datetime
    modified_at: Optional[datetime]
    modified_by: Optional[str]
    is_deleted: bool
    deleted_at: Optional[datetime]
    deleted_by: Optional[str]


class InMemoryDatabase:
    def __init__(self):
        self.todos: dict[int, TodoRecord] = {}
        self._sequences: dict[str, int] = {}
        self.write_lock = asyncio.Lock()

    def next_id(self, table: str) -> int:
        value = self._sequences.get(table, 0) + 1
        self._sequences[table] = value
        return value

    def snapshot(self) -> dict[str, dict]:
        return {"todos": dict(self.todos)}

    def restore(self, snapshot: dict[str, dict]) -> None:
        self.todos = dict(snapshot["todos"])


class InMemoryTransaction(TransactionPort):
    def __init__(self, database: InMemoryDatabase):
        self._database = database
        self._snapshot: Optional[dict[str, dict]] = None

    @property
    def is_active(self) -> bool:
        return self._snapshot is not None

    async def begin(self) -> None:
        if self.is_active:
            raise PersistenceError("A transaction is already active on this connection")

        await self._database.write_lock.acquire()
        self._snapshot = self._database.snapshot()
        logger.debug("Transaction started")

    async def commit(self) -> None:
        self._ensure_active()
        self._snapshot = None
        self._database.write_lock.release()
        logger.debug("Transaction committed")

    async def rollback(self) -> None:
        self._ensure_active()
        try:
            self._database.restore(self._snapshot)
        finally:
            self._snapshot = None
            self._database.write_lock.release()
        logger.debug("Transaction rolled back")

    def _ensure_active(self) -> None:
        if not self.is_active:
            raise PersistenceError("No active transaction")
