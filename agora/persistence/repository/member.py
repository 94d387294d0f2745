"""PostgreSQL implementation of Member repository."""

from typing import List, Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Member
from agora.domain.repository import MemberRepository
from agora.domain.value import MemberId
from agora.persistence.mappers import member_to_dict, row_to_member
from agora.persistence.tables import members_table


class PostgresMemberRepository(MemberRepository):
    """PostgreSQL implementation of MemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Find a member by ID."""
        stmt = select(members_table).where(members_table.c.id == member_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_member(row._asdict()) if row else None

    async def find_by_ids(self, member_ids: Sequence[MemberId]) -> List[Member]:
        """Find several members in one query."""
        if not member_ids:
            return []

        stmt = select(members_table).where(members_table.c.id.in_(member_ids))
        result = await self.session.execute(stmt)
        return [row_to_member(row._asdict()) for row in result.fetchall()]

    async def save(self, member: Member) -> Member:
        """Save a member (create or update)."""
        member_dict = member_to_dict(member)

        existing = await self.find_by_id(member.id)
        if existing:
            stmt = (
                update(members_table)
                .where(members_table.c.id == member.id)
                .values(**member_dict)
            )
        else:
            stmt = insert(members_table).values(**member_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return member

    async def adjust_points(self, member_id: MemberId, delta: int) -> int:
        """Atomically add ``delta`` to the points balance."""
        stmt = (
            update(members_table)
            .where(members_table.c.id == member_id)
            .values(points=members_table.c.points + delta)
            .returning(members_table.c.points)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one()

    async def increment_post_count(self, member_id: MemberId) -> None:
        """Atomically increment the post count by 1."""
        stmt = (
            update(members_table)
            .where(members_table.c.id == member_id)
            .values(post_count=members_table.c.post_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
