"""In-memory member repository for testing."""

from typing import Optional, Sequence

from agora.domain.model.member import Member
from agora.domain.repository.member import MemberRepository
from agora.domain.value import MemberId

from .database import InMemoryDatabase


class InMemoryMemberRepository(MemberRepository):
    """In-memory implementation of MemberRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        return self.database.members.get(member_id)

    async def find_by_ids(self, member_ids: Sequence[MemberId]) -> list[Member]:
        return [
            self.database.members[member_id]
            for member_id in member_ids
            if member_id in self.database.members
        ]

    async def save(self, member: Member) -> Member:
        self.database.members[member.id] = member
        return member

    async def adjust_points(self, member_id: MemberId, delta: int) -> int:
        member = self.database.members[member_id]
        updated = member.model_copy(update={"points": member.points + delta})
        self.database.members[member_id] = updated
        return updated.points

    async def increment_post_count(self, member_id: MemberId) -> None:
        member = self.database.members[member_id]
        self.database.members[member_id] = member.model_copy(
            update={"post_count": member.post_count + 1}
        )
