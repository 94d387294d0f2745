"""Member domain service."""

from typing import Sequence

import logfire

from agora.domain.error import NotAuthorizedError, NotFoundError
from agora.domain.model import Member
from agora.domain.repository import MemberRepository
from agora.domain.value import MemberId

from .base import Service


class MemberService(Service):
    """Domain service for member operations."""

    def __init__(self, member_repository: MemberRepository) -> None:
        self.member_repository = member_repository

    async def get_by_id(self, member_id: MemberId) -> Member:
        """Get member by ID.

        Raises:
            NotFoundError: If member not found
        """
        with logfire.span("member_service.get_by_id", member_id=str(member_id)):
            member = await self.member_repository.find_by_id(member_id)
            if not member:
                logfire.warn("Member not found", member_id=str(member_id))
                raise NotFoundError("Member", str(member_id))
            return member

    async def find_by_id(self, member_id: MemberId | None) -> Member | None:
        """Get member by ID, or None for anonymous visitors and unknown IDs."""
        if member_id is None:
            return None
        return await self.member_repository.find_by_id(member_id)

    async def get_many(self, member_ids: Sequence[MemberId]) -> list[Member]:
        """Load several members at once."""
        if not member_ids:
            return []
        return await self.member_repository.find_by_ids(member_ids)

    async def increment_post_count(self, member_id: MemberId) -> None:
        """Record one more post written by the member."""
        await self.member_repository.increment_post_count(member_id)
        logfire.info("Member post count incremented", member_id=str(member_id))

    @staticmethod
    def ensure_access(member: Member) -> None:
        """Raise if the account may not act at all.

        Raises:
            NotAuthorizedError: If the member is locked out or unapproved
        """
        if not member.has_access:
            logfire.warn(
                "Member without access",
                member_id=str(member.id),
                locked_out=member.is_locked_out,
                approved=member.is_approved,
            )
            raise NotAuthorizedError(str(member.id))

    @classmethod
    def ensure_can_post(cls, member: Member) -> None:
        """Raise if the member may not write content.

        Raises:
            NotAuthorizedError: If the member has no access or posting is disabled
        """
        cls.ensure_access(member)
        if member.disable_posting:
            logfire.warn("Member posting disabled", member_id=str(member.id))
            raise NotAuthorizedError(str(member.id))
