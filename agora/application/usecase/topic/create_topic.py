"""Create topic use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from agora.config import ForumSettings
from agora.domain.error import (
    AccessDeniedError,
    BannedContentError,
    TransactionError,
    ValidationError,
)
from agora.domain.model import Category, Member
from agora.domain.repository import UnitOfWork
from agora.domain.service import (
    CategoryService,
    ContentFilterService,
    MemberService,
    NotificationService,
    PermissionService,
    PollService,
    SpamService,
    TopicService,
)
from agora.domain.value import CategoryId, MemberId
from agora.util.lang import Lang

from .view import TopicView


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    member_id: str  # Member ID from authenticated member
    category_id: str  # UUID string
    name: str = Field(min_length=1, max_length=450)
    content: str = ""
    poll_answers: list[str] = Field(default_factory=list)
    subscribe: bool = False
    user_ip: str | None = None


class CreateTopicResponse(BaseModel):
    """Create topic response.

    ``pending`` topics are held for moderation and were not announced.
    ``info`` carries a non-fatal notice, such as a dropped poll.
    """

    topic: TopicView
    pending: bool
    message: str
    info: str | None = None


class CreateTopicUseCase:
    """Use case for starting a new topic."""

    def __init__(
        self,
        topic_service: TopicService,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
        content_filter_service: ContentFilterService,
        poll_service: PollService,
        spam_service: SpamService,
        notification_service: NotificationService,
        forum_settings: ForumSettings,
        lang: Lang,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.topic_service = topic_service
        self.category_service = category_service
        self.permission_service = permission_service
        self.member_service = member_service
        self.content_filter_service = content_filter_service
        self.poll_service = poll_service
        self.spam_service = spam_service
        self.notification_service = notification_service
        self.forum_settings = forum_settings
        self.lang = lang
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateTopicRequest) -> CreateTopicResponse:
        """Execute create topic flow.

        Steps:
        1. Check the member may post, the content has no banned link and the
           member's group may create topics in the category
        2. Sanitise banned words, create the optional poll, the topic and its
           starter post, and credit the creator
        3. Hold the topic for moderation if the category is moderated or the
           spam check flags it
        4. Commit, then notify category subscribers about live topics

        Args:
            request: Create topic request

        Returns:
            Create topic response

        Raises:
            NotFoundError: If the member or category does not exist
            NotAuthorizedError: If the member is locked out, unapproved or
                may not post
            BannedContentError: If the content contains a banned link
            AccessDeniedError: If the member may not create topics here
            ValidationError: If the content is empty
            TransactionError: If the topic could not be committed
        """
        member = await self.member_service.get_by_id(MemberId(UUID(request.member_id)))
        self.member_service.ensure_can_post(member)

        if await self.content_filter_service.contains_banned_link(request.content):
            raise BannedContentError("Topic content contains a banned link")

        category = await self.category_service.get_by_id(
            CategoryId(UUID(request.category_id))
        )
        permissions = await self.permission_service.get_permissions(category, member)
        if not permissions.can_create_topics:
            raise AccessDeniedError("create_topic", str(category.id))

        if not request.content.strip():
            raise ValidationError("Topic content is empty")

        with logfire.span(
            "create_topic", category_id=str(category.id), member_id=str(member.id)
        ):
            info = None
            async with self.unit_of_work:
                name = await self.content_filter_service.sanitise_banned_words(
                    request.name
                )
                content = await self.content_filter_service.sanitise_banned_words(
                    request.content
                )

                poll_id = None
                if any(answer.strip() for answer in request.poll_answers):
                    if permissions.can_create_polls:
                        poll = await self.poll_service.create_poll(
                            member, request.poll_answers
                        )
                        poll_id = poll.id
                    else:
                        logfire.info(
                            "Poll dropped, no permission", member_id=str(member.id)
                        )
                        info = self.lang("errors.no_permission_polls")

                topic = await self.topic_service.create_topic(
                    name,
                    category,
                    member,
                    pending=category.moderate_all_topics,
                    poll_id=poll_id,
                )
                topic, _ = await self.topic_service.add_starter_post(
                    topic, member, content
                )
                await self.member_service.increment_post_count(member.id)

                permalink = (
                    f"{self.forum_settings.root_url.rstrip('/')}/topics/{topic.slug}"
                )
                if not topic.pending and await self.spam_service.is_spam(
                    topic, content, member, permalink=permalink, user_ip=request.user_ip
                ):
                    topic = await self.topic_service.mark_pending(topic)

                if request.subscribe:
                    await self.notification_service.subscribe_to_topic(topic, member)

                try:
                    await self.unit_of_work.commit()
                except Exception as e:
                    logfire.error(
                        "Topic commit failed", member_id=str(member.id), error=str(e)
                    )
                    await self.unit_of_work.rollback()
                    raise TransactionError("Topic could not be saved") from e

            if topic.pending:
                return CreateTopicResponse(
                    topic=TopicView.from_topic(topic),
                    pending=True,
                    message=self.lang("moderation.awaiting"),
                    info=info,
                )

            await self._notify_subscribers(category, member)
            return CreateTopicResponse(
                topic=TopicView.from_topic(topic),
                pending=False,
                message=self.lang("topic.created"),
                info=info,
            )

    async def _notify_subscribers(self, category: Category, creator: Member) -> None:
        """Queue new-topic emails; the topic stands even if this fails."""
        try:
            async with self.unit_of_work:
                await self.notification_service.notify_new_topic(category, creator)
                await self.unit_of_work.commit()
        except Exception as e:
            logfire.error(
                "New topic notifications failed",
                category_id=str(category.id),
                error=str(e),
            )
