"""Cast vote use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.domain.error import DuplicateVoteError, TransactionError
from agora.domain.repository import UnitOfWork
from agora.domain.service import MemberService, PostService, VoteService
from agora.domain.value import MemberId, PostId, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str  # UUID string
    member_id: str  # Member ID from authenticated member
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response.

    ``count`` is the number of votes in the cast direction after an accepted
    vote, or the post's unchanged vote count after a rejected one.
    """

    accepted: bool
    count: int
    delta: int


class CastVoteUseCase:
    """Use case for up- or down-voting a post."""

    def __init__(
        self,
        vote_service: VoteService,
        member_service: MemberService,
        post_service: PostService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            member_service: Member domain service
            post_service: Post domain service
            unit_of_work: Transaction scope for the vote
        """
        self.vote_service = vote_service
        self.member_service = member_service
        self.post_service = post_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Load the voter and make sure the account may act
        2. Apply the vote rule inside one unit of work
        3. Commit, or roll back every change on failure

        Args:
            request: Cast vote request

        Returns:
            Cast vote response

        Raises:
            NotFoundError: If the voter or post does not exist
            NotAuthorizedError: If the voter is locked out or unapproved
            TransactionError: If the vote could not be committed
        """
        voter = await self.member_service.get_by_id(MemberId(UUID(request.member_id)))
        self.member_service.ensure_access(voter)

        post_id = PostId(UUID(request.post_id))

        async with self.unit_of_work:
            try:
                outcome = await self.vote_service.cast_vote(
                    post_id, voter, request.direction
                )
            except DuplicateVoteError:
                # Lost a race against the same member's other request
                await self.unit_of_work.rollback()
                post = await self.post_service.get_by_id(post_id)
                return CastVoteResponse(accepted=False, count=post.vote_count, delta=0)

            if not outcome.accepted:
                return CastVoteResponse(accepted=False, count=outcome.count, delta=0)

            try:
                await self.unit_of_work.commit()
            except Exception as e:
                logfire.error(
                    "Vote commit failed",
                    post_id=request.post_id,
                    member_id=request.member_id,
                    error=str(e),
                )
                await self.unit_of_work.rollback()
                raise TransactionError("Vote could not be saved") from e

        return CastVoteResponse(
            accepted=True, count=outcome.count, delta=outcome.delta
        )
