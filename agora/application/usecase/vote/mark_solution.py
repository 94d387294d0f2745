"""Mark solution use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.domain.error import DomainError, TransactionError
from agora.domain.repository import UnitOfWork
from agora.domain.service import MemberService, PostService, TopicService
from agora.domain.value import MemberId, PostId


class MarkSolutionRequest(BaseModel):
    """Mark solution request."""

    post_id: str  # UUID string
    member_id: str  # Member ID from authenticated member


class MarkSolutionResponse(BaseModel):
    solved: bool


class MarkSolutionUseCase:
    """Use case for accepting a reply as the solution of its topic."""

    def __init__(
        self,
        topic_service: TopicService,
        post_service: PostService,
        member_service: MemberService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.topic_service = topic_service
        self.post_service = post_service
        self.member_service = member_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: MarkSolutionRequest) -> MarkSolutionResponse:
        """Execute mark solution flow.

        Raises:
            NotFoundError: If the member, post or topic does not exist
            NotAuthorizedError: If the member is locked out or unapproved
            DomainError: If the member did not create the topic
            TransactionError: If the change could not be committed
        """
        marker = await self.member_service.get_by_id(MemberId(UUID(request.member_id)))
        self.member_service.ensure_access(marker)

        async with self.unit_of_work:
            post = await self.post_service.get_by_id(PostId(UUID(request.post_id)))
            topic = await self.topic_service.get_by_id(post.topic_id)

            if topic.member_id != marker.id:
                raise DomainError("Only the topic creator can mark a solution")

            solution_writer = await self.member_service.get_by_id(post.member_id)
            solved = await self.topic_service.solve_topic(
                topic, post, marker, solution_writer
            )
            if not solved:
                return MarkSolutionResponse(solved=False)

            try:
                await self.unit_of_work.commit()
            except Exception as e:
                logfire.error(
                    "Solution commit failed", post_id=request.post_id, error=str(e)
                )
                await self.unit_of_work.rollback()
                raise TransactionError("Solution could not be saved") from e

        return MarkSolutionResponse(solved=True)
