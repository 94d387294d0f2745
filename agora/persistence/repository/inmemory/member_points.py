"""In-memory points ledger repository for testing."""

from agora.domain.model.member_points import MemberPoints
from agora.domain.repository.member_points import MemberPointsRepository
from agora.domain.value import MemberId

from .database import InMemoryDatabase


class InMemoryMemberPointsRepository(MemberPointsRepository):
    """In-memory implementation of MemberPointsRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def add(self, entry: MemberPoints) -> MemberPoints:
        self.database.member_points.append(entry)
        return entry

    async def find_by_member(self, member_id: MemberId) -> list[MemberPoints]:
        entries = [e for e in self.database.member_points if e.member_id == member_id]
        entries.sort(key=lambda e: e.created_at)
        return entries
