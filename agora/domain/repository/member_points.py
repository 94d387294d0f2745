"""Points ledger repository interface."""

from abc import ABC, abstractmethod

from agora.domain.model.member_points import MemberPoints
from agora.domain.value import MemberId


class MemberPointsRepository(ABC):
    """Append-only repository for points ledger entries."""

    @abstractmethod
    async def add(self, entry: MemberPoints) -> MemberPoints:
        """Append a ledger entry."""
        pass

    @abstractmethod
    async def find_by_member(self, member_id: MemberId) -> list[MemberPoints]:
        """Find a member's ledger entries, oldest first."""
        pass
