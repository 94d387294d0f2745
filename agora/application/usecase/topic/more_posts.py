"""Load more posts use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.config import ForumSettings
from agora.domain.service import (
    CategoryService,
    MemberService,
    PermissionService,
    PostService,
    TopicService,
    VoteService,
)
from agora.domain.value import MemberId, PostOrderBy, TopicId

from .view import PostView, build_post_views


class MorePostsRequest(BaseModel):
    """Request for a further page of a topic's replies."""

    topic_id: str  # UUID string
    member_id: str | None = None
    page: int = 2
    order: str | None = None


class MorePostsResponse(BaseModel):
    posts: list[PostView]
    page_index: int
    total_pages: int


class MorePostsUseCase:
    """Use case for fetching further pages of replies from a topic page."""

    def __init__(
        self,
        topic_service: TopicService,
        post_service: PostService,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
        vote_service: VoteService,
        forum_settings: ForumSettings,
    ) -> None:
        self.topic_service = topic_service
        self.post_service = post_service
        self.category_service = category_service
        self.permission_service = permission_service
        self.member_service = member_service
        self.vote_service = vote_service
        self.forum_settings = forum_settings

    async def execute(self, request: MorePostsRequest) -> MorePostsResponse:
        """Execute more posts flow.

        A viewer denied access to the topic's category gets an empty page.

        Raises:
            NotFoundError: If the topic does not exist
        """
        topic = await self.topic_service.get_by_id(TopicId(UUID(request.topic_id)))
        viewer = await self.member_service.find_by_id(
            MemberId(UUID(request.member_id)) if request.member_id else None
        )

        category = await self.category_service.get_by_id(topic.category_id)
        permissions = await self.permission_service.get_permissions(category, viewer)
        if permissions.denies_access:
            return MorePostsResponse(posts=[], page_index=request.page, total_pages=0)

        page = await self.post_service.get_paged_posts_by_topic(
            topic.id,
            request.page,
            self.forum_settings.posts_per_page,
            PostOrderBy.parse(request.order),
        )
        posts = await build_post_views(
            page.posts, viewer, self.vote_service, self.member_service
        )
        return MorePostsResponse(
            posts=posts, page_index=page.page_index, total_pages=page.total_pages
        )
