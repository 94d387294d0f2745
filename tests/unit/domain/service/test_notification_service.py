"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from agora.domain.model import CategorySubscription
from agora.domain.repository import (
    EmailRepository,
    MemberRepository,
    SubscriptionRepository,
)
from agora.domain.service import NotificationService
from agora.domain.value import SubscriptionId
from tests.conftest import make_category, make_member, make_topic
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _subscribe(env, category, member) -> None:
    subscriptions = await env.get(SubscriptionRepository)
    await subscriptions.save_category_subscription(
        CategorySubscription(
            id=SubscriptionId(uuid4()), category_id=category.id, member_id=member.id
        )
    )


class TestNotifyNewTopic:
    """Tests for notify_new_topic."""

    @pytest.mark.asyncio
    async def test_queues_email_for_subscribers_except_creator(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        member_repo = await unit_env.get(MemberRepository)
        email_repo = await unit_env.get(EmailRepository)
        category = make_category("Help Desk")
        creator = await member_repo.save(make_member("creator"))
        reader = await member_repo.save(make_member("reader"))
        muted = await member_repo.save(
            make_member("muted", disable_email_notifications=True)
        )
        for member in (creator, reader, muted):
            await _subscribe(unit_env, category, member)

        # Act
        emails = await notification_service.notify_new_topic(category, creator)

        # Assert
        assert [e.email_to for e in emails] == ["reader@example.com"]
        email = emails[0]
        assert "Help Desk" in email.body
        assert "/categories/help-desk" in email.body
        assert email.subject.endswith("Agora")
        assert await email_repo.find_queued() == emails

    @pytest.mark.asyncio
    async def test_no_subscribers_queues_nothing(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        email_repo = await unit_env.get(EmailRepository)

        emails = await notification_service.notify_new_topic(
            make_category("Quiet"), make_member("creator")
        )

        assert emails == []
        assert await email_repo.find_queued() == []


class TestTopicSubscriptions:
    """Tests for topic subscriptions."""

    @pytest.mark.asyncio
    async def test_subscribe_is_idempotent(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        member = make_member("alice")
        topic = make_topic(make_category("General"), member)

        first = await notification_service.subscribe_to_topic(topic, member)
        second = await notification_service.subscribe_to_topic(topic, member)

        assert first == second
        assert await notification_service.is_subscribed(topic, member.id)
        assert not await notification_service.is_subscribed(topic, None)
