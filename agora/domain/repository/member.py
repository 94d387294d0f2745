"""Member repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.member import Member
from agora.domain.value import MemberId


class MemberRepository(ABC):
    """Repository for Member aggregate."""

    @abstractmethod
    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Find a member by ID.

        Args:
            member_id: The member's unique identifier

        Returns:
            The member if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, member_ids: Sequence[MemberId]) -> list[Member]:
        """Find several members in one query.

        Args:
            member_ids: Member IDs to load

        Returns:
            Members found (unknown IDs are skipped)
        """
        pass

    @abstractmethod
    async def save(self, member: Member) -> Member:
        """Save a member (create or update).

        Args:
            member: The member to save

        Returns:
            The saved member
        """
        pass

    @abstractmethod
    async def adjust_points(self, member_id: MemberId, delta: int) -> int:
        """Atomically add ``delta`` to a member's points balance.

        Args:
            member_id: Member whose balance changes
            delta: Signed amount

        Returns:
            The new balance
        """
        pass

    @abstractmethod
    async def increment_post_count(self, member_id: MemberId) -> None:
        """Atomically increment a member's post count.

        Args:
            member_id: Member ID
        """
        pass
