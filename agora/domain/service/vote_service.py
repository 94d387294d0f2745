"""Vote domain service."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from agora.config import PointsSettings
from agora.domain.error import DuplicateVoteError
from agora.domain.model import Member, Post, Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import PostId, VoteDirection, VoteId

from .base import Service
from .member_points_service import MemberPointsService
from .member_service import MemberService
from .post_service import PostService


@dataclass
class VoteOutcome:
    """Result of a vote attempt.

    ``count`` is the number of the post's votes in the cast direction when
    the vote was accepted, and the post's unchanged net vote count when it
    was rejected.
    """

    accepted: bool
    count: int
    delta: int = 0
    vote: Vote | None = None


class VoteService(Service):
    """Domain service for votes and the points they move."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        member_service: MemberService,
        member_points_service: MemberPointsService,
        points_settings: PointsSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            member_service: Member domain service
            member_points_service: Points ledger service
            points_settings: Vote threshold and point amounts
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.member_service = member_service
        self.member_points_service = member_points_service
        self.points_settings = points_settings

    def points_for(self, direction: VoteDirection) -> int:
        """Points moved on the post author's balance by a vote.

        Down-votes always subtract, whatever the sign of the setting.
        """
        if direction == VoteDirection.UP:
            return abs(self.points_settings.points_added_positive_vote)
        return -abs(self.points_settings.points_deducted_negative_vote)

    def is_eligible(self, post: Post, voter: Member) -> bool:
        """Whether ``voter`` passes the author and points checks for ``post``."""
        return (
            voter.id != post.member_id
            and voter.points > self.points_settings.points_before_vote
        )

    async def can_vote(self, post: Post, voter: Member) -> bool:
        """Whether ``voter`` may vote on ``post``.

        The voter must not be the author, must have strictly more points than
        the configured threshold, and must not have voted on the post yet.
        """
        if voter.id == post.member_id:
            logfire.info("Self vote rejected", post_id=str(post.id))
            return False

        if voter.points <= self.points_settings.points_before_vote:
            logfire.info(
                "Vote rejected, not enough points",
                member_id=str(voter.id),
                points=voter.points,
                threshold=self.points_settings.points_before_vote,
            )
            return False

        existing = await self.vote_repository.find_by_member_and_post(
            voter.id, post.id
        )
        if existing is not None:
            logfire.info(
                "Duplicate vote rejected",
                member_id=str(voter.id),
                post_id=str(post.id),
            )
            return False

        return True

    async def cast_vote(
        self, post_id: PostId, voter: Member, direction: VoteDirection
    ) -> VoteOutcome:
        """Cast a vote on a post.

        Records the vote, moves the post's vote count by one and credits or
        debits the post author through the points ledger. Must run inside a
        unit of work: nothing here commits.

        Args:
            post_id: Post voted on
            voter: Acting member
            direction: Up or down

        Returns:
            Outcome of the attempt; a rejected attempt changes nothing

        Raises:
            NotFoundError: If the post or its author does not exist
            DuplicateVoteError: If a concurrent vote by the same member won
                the race (the unit of work must be rolled back)
        """
        with logfire.span(
            "cast_vote",
            post_id=str(post_id),
            member_id=str(voter.id),
            direction=direction.value,
        ):
            post = await self.post_service.get_by_id(post_id)

            if not await self.can_vote(post, voter):
                return VoteOutcome(accepted=False, count=post.vote_count)

            author = await self.member_service.get_by_id(post.member_id)
            delta = self.points_for(direction)

            vote = Vote(
                id=VoteId(uuid4()),
                post_id=post.id,
                member_id=voter.id,
                amount=direction.amount,
                voted_at=datetime.now(),
            )
            try:
                saved_vote = await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote insert",
                    member_id=str(voter.id),
                    post_id=str(post.id),
                )
                raise DuplicateVoteError(str(post.id))

            await self.member_points_service.add(
                author.id, delta, related_post_id=post.id
            )

            await self.post_service.adjust_vote_count(post.id, direction.amount)

            votes = await self.vote_repository.find_by_post(post.id)
            if direction == VoteDirection.UP:
                count = sum(1 for v in votes if v.amount > 0)
            else:
                count = sum(1 for v in votes if v.amount < 0)

            logfire.info(
                "Vote cast",
                post_id=str(post.id),
                author_id=str(author.id),
                amount=vote.amount,
                delta=delta,
                count=count,
            )
            return VoteOutcome(accepted=True, count=count, delta=delta, vote=saved_vote)

    async def get_votes_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[Vote]]:
        """Load the votes of several posts, grouped by post.

        Args:
            post_ids: Posts to load votes for

        Returns:
            Mapping of post ID to its votes (posts without votes are absent)
        """
        if not post_ids:
            return {}

        # Batch query to avoid N+1
        votes = await self.vote_repository.find_by_posts(post_ids)
        grouped: dict[PostId, list[Vote]] = defaultdict(list)
        for vote in votes:
            grouped[vote.post_id].append(vote)
        return dict(grouped)
