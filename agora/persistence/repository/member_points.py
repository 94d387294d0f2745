"""PostgreSQL implementation of the points ledger repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import MemberPoints
from agora.domain.repository import MemberPointsRepository
from agora.domain.value import MemberId
from agora.persistence.mappers import member_points_to_dict, row_to_member_points
from agora.persistence.tables import member_points_table


class PostgresMemberPointsRepository(MemberPointsRepository):
    """PostgreSQL implementation of MemberPointsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, entry: MemberPoints) -> MemberPoints:
        """Append a ledger entry."""
        stmt = insert(member_points_table).values(**member_points_to_dict(entry))
        await self.session.execute(stmt)
        await self.session.flush()
        return entry

    async def find_by_member(self, member_id: MemberId) -> List[MemberPoints]:
        """Find a member's ledger entries, oldest first."""
        stmt = (
            select(member_points_table)
            .where(member_points_table.c.member_id == member_id)
            .order_by(member_points_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_member_points(row._asdict()) for row in result.fetchall()]
