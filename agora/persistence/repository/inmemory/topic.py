"""In-memory topic repository for testing."""

from typing import Optional

from agora.domain.model.topic import Topic
from agora.domain.repository.topic import TopicRepository
from agora.domain.value import Slug, TopicId

from .database import InMemoryDatabase


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        return self.database.topics.get(topic_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Topic]:
        for topic in self.database.topics.values():
            if topic.slug == slug:
                return topic
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        return any(topic.slug == slug for topic in self.database.topics.values())

    async def save(self, topic: Topic) -> Topic:
        """Save a topic, keeping the stored view count on updates."""
        existing = self.database.topics.get(topic.id)
        if existing is not None:
            topic = topic.model_copy(update={"views": existing.views})
        self.database.topics[topic.id] = topic
        return topic

    async def find_recent(self, limit: int) -> list[Topic]:
        topics = [t for t in self.database.topics.values() if not t.pending]
        topics.sort(key=lambda t: t.created_at, reverse=True)
        return topics[:limit]

    async def increment_views(self, topic_id: TopicId) -> None:
        topic = self.database.topics[topic_id]
        self.database.topics[topic_id] = topic.model_copy(
            update={"views": topic.views + 1}
        )
