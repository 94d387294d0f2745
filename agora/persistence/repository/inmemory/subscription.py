"""In-memory subscription repository for testing."""

from typing import Optional

from agora.domain.model.subscription import CategorySubscription, TopicSubscription
from agora.domain.repository.subscription import SubscriptionRepository
from agora.domain.value import CategoryId, MemberId, TopicId

from .database import InMemoryDatabase


class InMemorySubscriptionRepository(SubscriptionRepository):
    """In-memory implementation of SubscriptionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def save_topic_subscription(
        self, subscription: TopicSubscription
    ) -> TopicSubscription:
        self.database.topic_subscriptions.append(subscription)
        return subscription

    async def find_topic_subscription(
        self, member_id: MemberId, topic_id: TopicId
    ) -> Optional[TopicSubscription]:
        return next(
            (
                s
                for s in self.database.topic_subscriptions
                if s.member_id == member_id and s.topic_id == topic_id
            ),
            None,
        )

    async def save_category_subscription(
        self, subscription: CategorySubscription
    ) -> CategorySubscription:
        self.database.category_subscriptions.append(subscription)
        return subscription

    async def find_category_subscribers(
        self, category_id: CategoryId
    ) -> list[MemberId]:
        return [
            s.member_id
            for s in self.database.category_subscriptions
            if s.category_id == category_id
        ]
