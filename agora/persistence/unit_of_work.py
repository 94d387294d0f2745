"""PostgreSQL unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work over the request's ``AsyncSession``.

    Repositories share the same session, so everything they flush inside
    the block is committed or rolled back together.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__()
        self.session = session

    async def _begin(self) -> None:
        # Drop anything left over from reads done before the block
        if self.session.in_transaction():
            await self.session.rollback()

    async def _commit(self) -> None:
        with logfire.span("unit_of_work.commit"):
            await self.session.commit()

    async def _rollback(self) -> None:
        logfire.info("Rolling back unit of work")
        await self.session.rollback()
