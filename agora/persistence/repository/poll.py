"""PostgreSQL implementation of Poll repository."""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Poll, PollAnswer, PollVote
from agora.domain.repository import PollRepository
from agora.domain.value import PollId
from agora.persistence.mappers import row_to_poll, row_to_poll_answer, row_to_poll_vote
from agora.persistence.tables import poll_answers_table, poll_votes_table, polls_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, poll: Poll) -> Poll:
        await self.session.execute(insert(polls_table).values(**poll.model_dump()))
        await self.session.flush()
        return poll

    async def save_answer(self, answer: PollAnswer) -> PollAnswer:
        await self.session.execute(
            insert(poll_answers_table).values(**answer.model_dump())
        )
        await self.session.flush()
        return answer

    async def save_vote(self, vote: PollVote) -> PollVote:
        await self.session.execute(insert(poll_votes_table).values(**vote.model_dump()))
        await self.session.flush()
        return vote

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        stmt = select(polls_table).where(polls_table.c.id == poll_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_poll(row._asdict()) if row else None

    async def find_answers(self, poll_id: PollId) -> List[PollAnswer]:
        stmt = select(poll_answers_table).where(poll_answers_table.c.poll_id == poll_id)
        result = await self.session.execute(stmt)
        return [row_to_poll_answer(row._asdict()) for row in result.fetchall()]

    async def find_votes(self, poll_id: PollId) -> List[PollVote]:
        """Find all votes on any answer of a poll."""
        stmt = (
            select(poll_votes_table)
            .join(
                poll_answers_table,
                poll_votes_table.c.answer_id == poll_answers_table.c.id,
            )
            .where(poll_answers_table.c.poll_id == poll_id)
        )
        result = await self.session.execute(stmt)
        return [row_to_poll_vote(row._asdict()) for row in result.fetchall()]
