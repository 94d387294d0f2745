"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.topic import Topic
from agora.domain.value import Slug, TopicId


class TopicRepository(ABC):
    """Repository for Topic aggregate."""

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Topic]:
        """Find a topic by its URL slug."""
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Save a topic (create or update)."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int) -> list[Topic]:
        """Find the most recent non-pending topics, newest first.

        Args:
            limit: Maximum number of topics to return

        Returns:
            Recent topics
        """
        pass

    @abstractmethod
    async def increment_views(self, topic_id: TopicId) -> None:
        """Atomically increment a topic's view count."""
        pass
