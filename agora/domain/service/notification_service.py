"""Subscription and notification domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.config import ForumSettings
from agora.domain.model import Category, Email, Member, Topic, TopicSubscription
from agora.domain.repository import EmailRepository, SubscriptionRepository
from agora.domain.value import EmailId, MemberId, SubscriptionId
from agora.util.lang import Lang

from .base import Service
from .member_service import MemberService


class NotificationService(Service):
    """Manages topic subscriptions and queues notification emails.

    Emails are queued through the email repository; sending them is left to
    whatever drains the queue.
    """

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        email_repository: EmailRepository,
        member_service: MemberService,
        forum_settings: ForumSettings,
        lang: Lang,
    ) -> None:
        self.subscription_repository = subscription_repository
        self.email_repository = email_repository
        self.member_service = member_service
        self.forum_settings = forum_settings
        self.lang = lang

    async def subscribe_to_topic(
        self, topic: Topic, member: Member
    ) -> TopicSubscription:
        """Subscribe a member to a topic (idempotent)."""
        existing = await self.subscription_repository.find_topic_subscription(
            member.id, topic.id
        )
        if existing is not None:
            return existing

        subscription = await self.subscription_repository.save_topic_subscription(
            TopicSubscription(
                id=SubscriptionId(uuid4()),
                topic_id=topic.id,
                member_id=member.id,
                created_at=datetime.now(),
            )
        )
        logfire.info(
            "Subscribed to topic", topic_id=str(topic.id), member_id=str(member.id)
        )
        return subscription

    async def is_subscribed(self, topic: Topic, member_id: MemberId | None) -> bool:
        if member_id is None:
            return False
        subscription = await self.subscription_repository.find_topic_subscription(
            member_id, topic.id
        )
        return subscription is not None

    async def notify_new_topic(
        self, category: Category, creator: Member
    ) -> list[Email]:
        """Queue a "new topic" email for every subscriber of ``category``.

        The creator and members who disabled email notifications are skipped,
        as are members without an email address.

        Args:
            category: Category the topic was posted in
            creator: Member who created the topic

        Returns:
            The queued emails
        """
        with logfire.span(
            "notification_service.notify_new_topic", category=category.name
        ):
            subscribers = await self.subscription_repository.find_category_subscribers(
                category.id
            )
            subscriber_ids = [m for m in subscribers if m != creator.id]
            if not subscriber_ids:
                return []

            members = await self.member_service.get_many(subscriber_ids)

            category_url = (
                f"{self.forum_settings.root_url.rstrip('/')}/categories/{category.slug}"
            )
            message = self.lang("notification.new_topic", category=category.name)
            subject = (
                self.lang("notification.new_topic_subject") + self.forum_settings.name
            )

            emails = [
                Email(
                    id=EmailId(uuid4()),
                    email_to=member.email,
                    name_to=member.username,
                    email_from=self.forum_settings.notification_reply_email,
                    subject=subject,
                    body=f"<p>{message}</p><p>{category_url}</p>",
                    created_at=datetime.now(),
                )
                for member in members
                if not member.disable_email_notifications and member.email
            ]

            if emails:
                await self.email_repository.enqueue(emails)
            logfire.info(
                "New topic notifications queued",
                category_id=str(category.id),
                count=len(emails),
            )
            return emails
