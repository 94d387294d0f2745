"""Unit of work interface."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type


class UnitOfWork(ABC):
    """Explicit transaction scope.

    Usage:

        async with unit_of_work:
            ...
            await unit_of_work.commit()

    Leaving the block without a commit (normally or through an exception)
    rolls back every change made inside it.
    """

    def __init__(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    async def __aenter__(self) -> "UnitOfWork":
        await self._begin()
        self._active = True
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._active:
            await self.rollback()

    async def commit(self) -> None:
        """Make the changes of this unit of work permanent."""
        await self._commit()
        self._active = False

    async def rollback(self) -> None:
        """Discard the changes of this unit of work."""
        self._active = False
        await self._rollback()

    @abstractmethod
    async def _begin(self) -> None:
        pass

    @abstractmethod
    async def _commit(self) -> None:
        pass

    @abstractmethod
    async def _rollback(self) -> None:
        pass
