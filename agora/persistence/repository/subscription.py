"""PostgreSQL implementation of Subscription repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import CategorySubscription, TopicSubscription
from agora.domain.repository import SubscriptionRepository
from agora.domain.value import CategoryId, MemberId, TopicId
from agora.persistence.mappers import row_to_topic_subscription
from agora.persistence.tables import (
    category_subscriptions_table,
    topic_subscriptions_table,
)


class PostgresSubscriptionRepository(SubscriptionRepository):
    """PostgreSQL implementation of SubscriptionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save_topic_subscription(
        self, subscription: TopicSubscription
    ) -> TopicSubscription:
        stmt = insert(topic_subscriptions_table).values(**subscription.model_dump())
        await self.session.execute(stmt)
        await self.session.flush()
        return subscription

    async def find_topic_subscription(
        self, member_id: MemberId, topic_id: TopicId
    ) -> Optional[TopicSubscription]:
        stmt = select(topic_subscriptions_table).where(
            and_(
                topic_subscriptions_table.c.member_id == member_id,
                topic_subscriptions_table.c.topic_id == topic_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic_subscription(row._asdict()) if row else None

    async def save_category_subscription(
        self, subscription: CategorySubscription
    ) -> CategorySubscription:
        stmt = insert(category_subscriptions_table).values(**subscription.model_dump())
        await self.session.execute(stmt)
        await self.session.flush()
        return subscription

    async def find_category_subscribers(
        self, category_id: CategoryId
    ) -> List[MemberId]:
        """Find the IDs of the members subscribed to a category."""
        stmt = select(category_subscriptions_table.c.member_id).where(
            category_subscriptions_table.c.category_id == category_id
        )
        result = await self.session.execute(stmt)
        return [MemberId(row.member_id) for row in result.fetchall()]
