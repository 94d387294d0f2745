"""Subscription repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.subscription import CategorySubscription, TopicSubscription
from agora.domain.value import CategoryId, MemberId, TopicId


class SubscriptionRepository(ABC):
    """Repository for topic and category subscriptions."""

    @abstractmethod
    async def save_topic_subscription(
        self, subscription: TopicSubscription
    ) -> TopicSubscription:
        """Save a topic subscription."""
        pass

    @abstractmethod
    async def find_topic_subscription(
        self, member_id: MemberId, topic_id: TopicId
    ) -> Optional[TopicSubscription]:
        """Find a member's subscription to a topic."""
        pass

    @abstractmethod
    async def save_category_subscription(
        self, subscription: CategorySubscription
    ) -> CategorySubscription:
        """Save a category subscription."""
        pass

    @abstractmethod
    async def find_category_subscribers(
        self, category_id: CategoryId
    ) -> list[MemberId]:
        """Find the IDs of all members subscribed to a category."""
        pass
