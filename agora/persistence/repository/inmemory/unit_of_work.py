"""In-memory unit of work for testing."""

from typing import Optional

from agora.domain.repository import UnitOfWork

from .database import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """Snapshots the in-memory database on begin, restores it on rollback."""

    def __init__(self, database: InMemoryDatabase) -> None:
        super().__init__()
        self.database = database
        self.commits = 0
        self.rollbacks = 0
        self._snapshot: Optional[dict] = None

    async def _begin(self) -> None:
        self._snapshot = self.database.snapshot()

    async def _commit(self) -> None:
        self._snapshot = None
        self.commits += 1

    async def _rollback(self) -> None:
        if self._snapshot is not None:
            self.database.restore(self._snapshot)
            self._snapshot = None
        self.rollbacks += 1
