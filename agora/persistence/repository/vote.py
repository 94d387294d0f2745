"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import MemberId, PostId
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_member_and_post(
        self, member_id: MemberId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a member's vote on a post."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.member_id == member_id,
                votes_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post."""
        stmt = select(votes_table).where(votes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> List[Vote]:
        """Find all votes on several posts (batch query)."""
        if not post_ids:
            return []

        stmt = select(votes_table).where(votes_table.c.post_id.in_(post_ids))
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The ``unique_vote`` constraint raises IntegrityError on flush when the
        member already voted on the post.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote
