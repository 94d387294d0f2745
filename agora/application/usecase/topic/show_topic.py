"""Show topic use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.config import ForumSettings
from agora.domain.error import AccessDeniedError, NotFoundError
from agora.domain.model import Member, Topic
from agora.domain.repository import UnitOfWork
from agora.domain.service import (
    CategoryService,
    MemberService,
    NotificationService,
    PermissionService,
    PollService,
    PostService,
    TopicService,
    VoteService,
)
from agora.domain.value import MemberId, PostId, PostOrderBy

from .view import PermissionView, PostView, TopicView, build_post_views

# Substrings of user agents that should not count as topic views
BOT_USER_AGENT_MARKERS = ("bot", "crawler", "spider", "slurp", "facebookexternalhit")


class ShowTopicRequest(BaseModel):
    """Show topic request."""

    slug: str
    member_id: str | None = None  # Current member ID (if authenticated)
    page: int = 1
    order: str | None = None
    quote_post_id: str | None = None
    user_agent: str | None = None


class PollView(BaseModel):
    total_votes: int
    viewer_has_voted: bool
    answers: dict[str, int]


class ShowTopicResponse(BaseModel):
    """Show topic response."""

    topic: TopicView
    starter_post: PostView
    posts: list[PostView]
    order: PostOrderBy
    page_index: int
    total_count: int
    total_pages: int
    permissions: PermissionView
    is_subscribed: bool
    poll: PollView | None = None
    quoted_content: str | None = None


def is_bot(user_agent: str | None) -> bool:
    if not user_agent:
        return False
    lowered = user_agent.lower()
    return any(marker in lowered for marker in BOT_USER_AGENT_MARKERS)


class ShowTopicUseCase:
    """Use case for showing a topic with one page of its replies."""

    def __init__(
        self,
        topic_service: TopicService,
        post_service: PostService,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
        vote_service: VoteService,
        poll_service: PollService,
        notification_service: NotificationService,
        forum_settings: ForumSettings,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.topic_service = topic_service
        self.post_service = post_service
        self.category_service = category_service
        self.permission_service = permission_service
        self.member_service = member_service
        self.vote_service = vote_service
        self.poll_service = poll_service
        self.notification_service = notification_service
        self.forum_settings = forum_settings
        self.unit_of_work = unit_of_work

    async def execute(self, request: ShowTopicRequest) -> ShowTopicResponse:
        """Execute show topic flow.

        Args:
            request: Show topic request

        Returns:
            The topic page

        Raises:
            NotFoundError: If no visible topic has the slug
            AccessDeniedError: If the viewer's group is denied access to the
                topic's category
        """
        with logfire.span("show_topic", slug=request.slug, page=request.page):
            topic = await self.topic_service.get_by_slug(request.slug)
            if topic is None:
                raise NotFoundError("Topic", request.slug)

            viewer = await self.member_service.find_by_id(
                MemberId(UUID(request.member_id)) if request.member_id else None
            )

            category = await self.category_service.get_by_id(topic.category_id)
            permissions = await self.permission_service.get_permissions(
                category, viewer
            )
            if permissions.denies_access:
                raise AccessDeniedError("view", str(topic.id))

            if topic.pending and not self._may_see_pending(
                topic, viewer, permissions.can_moderate
            ):
                raise NotFoundError("Topic", request.slug)

            order = PostOrderBy.parse(request.order)
            starter = await self.post_service.get_topic_starter(topic.id)
            page = await self.post_service.get_paged_posts_by_topic(
                topic.id, request.page, self.forum_settings.posts_per_page, order
            )

            post_views = await build_post_views(
                [starter, *page.posts], viewer, self.vote_service, self.member_service
            )

            poll_view = None
            if topic.poll_id is not None:
                summary = await self.poll_service.get_summary(
                    topic.poll_id, viewer.id if viewer else None
                )
                if summary is not None:
                    poll_view = PollView(
                        total_votes=summary.total_votes,
                        viewer_has_voted=summary.viewer_has_voted,
                        answers={
                            answer.answer: summary.votes_per_answer.get(answer.id, 0)
                            for answer in summary.answers
                        },
                    )

            quoted_content = await self._quoted_content(topic, request.quote_post_id)
            is_subscribed = await self.notification_service.is_subscribed(
                topic, viewer.id if viewer else None
            )

            if not is_bot(request.user_agent) and (
                viewer is None or viewer.id != topic.member_id
            ):
                topic = await self._count_view(topic)

            return ShowTopicResponse(
                topic=TopicView.from_topic(topic),
                starter_post=post_views[0],
                posts=post_views[1:],
                order=order,
                page_index=page.page_index,
                total_count=page.total_count,
                total_pages=page.total_pages,
                permissions=PermissionView.from_permissions(permissions),
                is_subscribed=is_subscribed,
                poll=poll_view,
                quoted_content=quoted_content,
            )

    @staticmethod
    def _may_see_pending(
        topic: Topic, viewer: Optional[Member], can_moderate: bool
    ) -> bool:
        return viewer is not None and (can_moderate or viewer.id == topic.member_id)

    async def _quoted_content(
        self, topic: Topic, quote_post_id: str | None
    ) -> str | None:
        if not quote_post_id:
            return None
        try:
            post_id = PostId(UUID(quote_post_id))
        except ValueError:
            return None

        post = await self.post_service.find_by_id(post_id)
        if post is None or post.topic_id != topic.id:
            return None
        return post.content

    async def _count_view(self, topic: Topic) -> Topic:
        """Increment the view count; a failure only costs the view."""
        try:
            async with self.unit_of_work:
                await self.topic_service.increment_views(topic)
                await self.unit_of_work.commit()
        except Exception as e:
            logfire.error(
                "Topic view count update failed",
                topic_id=str(topic.id),
                error=str(e),
            )
            return topic
        return topic.model_copy(update={"views": topic.views + 1})
