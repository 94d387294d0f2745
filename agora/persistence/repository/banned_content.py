"""PostgreSQL implementation of the banned word and link lists."""

from typing import List

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import BannedContentRepository
from agora.persistence.tables import banned_links_table, banned_words_table


class PostgresBannedContentRepository(BannedContentRepository):
    """PostgreSQL implementation of BannedContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_banned_words(self) -> List[str]:
        result = await self.session.execute(select(banned_words_table.c.word))
        return [row.word for row in result.fetchall()]

    async def find_banned_links(self) -> List[str]:
        result = await self.session.execute(select(banned_links_table.c.domain))
        return [row.domain for row in result.fetchall()]

    async def add_banned_word(self, word: str) -> None:
        stmt = pg_insert(banned_words_table).values(word=word).on_conflict_do_nothing()
        await self.session.execute(stmt)
        await self.session.flush()

    async def add_banned_link(self, domain: str) -> None:
        stmt = (
            pg_insert(banned_links_table).values(domain=domain).on_conflict_do_nothing()
        )
        await self.session.execute(stmt)
        await self.session.flush()
