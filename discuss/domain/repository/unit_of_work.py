"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commit boundary of the current request.

    Writes are made durable by ``commit``. Use cases commit before
    invalidating cached forests so a concurrent reader can't rebuild a
    forest from rows that are about to change.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit pending writes."""
        pass
