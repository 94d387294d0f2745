"""Points ledger domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.model import MemberPoints
from agora.domain.repository import MemberPointsRepository, MemberRepository
from agora.domain.value import MemberId, MemberPointsId, PostId

from .base import Service


class MemberPointsService(Service):
    """Keeps the points ledger and the members' balances in step.

    Every balance change goes through ``add`` so the balance always equals
    the sum of the member's ledger entries.
    """

    def __init__(
        self,
        member_points_repository: MemberPointsRepository,
        member_repository: MemberRepository,
    ) -> None:
        self.member_points_repository = member_points_repository
        self.member_repository = member_repository

    async def add(
        self,
        member_id: MemberId,
        points: int,
        related_post_id: PostId | None = None,
    ) -> MemberPoints:
        """Append a ledger entry and apply it to the member's balance.

        Args:
            member_id: Member credited or debited
            points: Signed delta
            related_post_id: Post that caused the change, if any

        Returns:
            The ledger entry
        """
        with logfire.span(
            "member_points_service.add", member_id=str(member_id), points=points
        ):
            entry = MemberPoints(
                id=MemberPointsId(uuid4()),
                member_id=member_id,
                points=points,
                related_post_id=related_post_id,
                created_at=datetime.now(),
            )
            saved = await self.member_points_repository.add(entry)
            balance = await self.member_repository.adjust_points(member_id, points)
            logfire.info(
                "Points ledger entry added",
                member_id=str(member_id),
                points=points,
                balance=balance,
            )
            return saved

    async def get_ledger(self, member_id: MemberId) -> list[MemberPoints]:
        """Return a member's ledger entries."""
        return await self.member_points_repository.find_by_member(member_id)
