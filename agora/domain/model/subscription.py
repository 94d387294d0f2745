"""Notification subscriptions.

Members subscribe to topics and categories to be told about new activity.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CategoryId, MemberId, SubscriptionId, TopicId


class TopicSubscription(DomainModel):
    id: SubscriptionId
    topic_id: TopicId
    member_id: MemberId
    created_at: datetime = Field(default_factory=datetime.now)


class CategorySubscription(DomainModel):
    id: SubscriptionId
    category_id: CategoryId
    member_id: MemberId
    created_at: datetime = Field(default_factory=datetime.now)
