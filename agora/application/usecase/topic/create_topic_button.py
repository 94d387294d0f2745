"""Create topic button use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import CategoryService, MemberService, PermissionService
from agora.domain.value import MemberId


class CreateTopicButtonRequest(BaseModel):
    member_id: str | None = None
    category_id: str | None = None


class CreateTopicButtonResponse(BaseModel):
    logged_on: bool
    can_create_topics: bool
    category_id: str | None = None


class CreateTopicButtonUseCase:
    """Decides whether to offer the viewer a "new topic" button."""

    def __init__(
        self,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
    ) -> None:
        self.category_service = category_service
        self.permission_service = permission_service
        self.member_service = member_service

    async def execute(
        self, request: CreateTopicButtonRequest
    ) -> CreateTopicButtonResponse:
        """The button shows when the member may create topics in any category."""
        member = await self.member_service.find_by_id(
            MemberId(UUID(request.member_id)) if request.member_id else None
        )
        if member is None:
            return CreateTopicButtonResponse(
                logged_on=False,
                can_create_topics=False,
                category_id=request.category_id,
            )

        can_create_topics = False
        for category in await self.category_service.get_all():
            permissions = await self.permission_service.get_permissions(
                category, member
            )
            if permissions.can_create_topics:
                can_create_topics = True
                break

        return CreateTopicButtonResponse(
            logged_on=True,
            can_create_topics=can_create_topics,
            category_id=request.category_id,
        )
