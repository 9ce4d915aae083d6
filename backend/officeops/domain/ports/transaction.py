"""
Transaction Port - the connection/transaction resource owned by one unit of work.

Implementations must not be shared between concurrent requests.
"""

from abc import ABC, abstractmethod


class TransactionPort(ABC):
    @property
    @abstractmethod
    def is_active(self) -> bool: ...

    @abstractmethod
    async def begin(self) -> None: ...

    @abstractmethod
    async def commit(self) -> None: ...

    @abstractmethod
    async def rollback(self) -> None: ...
