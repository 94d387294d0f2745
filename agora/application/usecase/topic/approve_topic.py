"""Approve topic use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.domain.error import AccessDeniedError
from agora.domain.repository import UnitOfWork
from agora.domain.service import MemberService, TopicService
from agora.domain.value import MemberId, TopicId


class ApproveTopicRequest(BaseModel):
    topic_id: str  # UUID string
    member_id: str  # Member ID from authenticated member


class ApproveTopicResponse(BaseModel):
    topic_id: str
    pending: bool


class ApproveTopicUseCase:
    """Use case for an admin releasing a topic held for moderation."""

    def __init__(
        self,
        topic_service: TopicService,
        member_service: MemberService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.topic_service = topic_service
        self.member_service = member_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: ApproveTopicRequest) -> ApproveTopicResponse:
        """Execute approve topic flow.

        Raises:
            NotFoundError: If the member or topic does not exist
            NotAuthorizedError: If the member is locked out or unapproved
            AccessDeniedError: If the member is not an admin
        """
        member = await self.member_service.get_by_id(MemberId(UUID(request.member_id)))
        self.member_service.ensure_access(member)
        if not member.is_admin:
            raise AccessDeniedError("approve_topic", request.topic_id)

        async with self.unit_of_work:
            topic = await self.topic_service.get_by_id(TopicId(UUID(request.topic_id)))
            topic = await self.topic_service.approve(topic)
            try:
                await self.unit_of_work.commit()
            except Exception as e:
                logfire.error(
                    "Topic approval commit failed",
                    topic_id=request.topic_id,
                    error=str(e),
                )
                await self.unit_of_work.rollback()
                raise

        return ApproveTopicResponse(topic_id=str(topic.id), pending=topic.pending)
