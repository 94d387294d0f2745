"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.post import Post
from agora.domain.value import PostId, PostOrderBy, TopicId


class PostRepository(ABC):
    """Repository for Post entity.

    Paged queries only return replies: the topic starter post is loaded
    separately with ``find_topic_starter``.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass

    @abstractmethod
    async def find_topic_starter(self, topic_id: TopicId) -> Optional[Post]:
        """Find the first post of a topic."""
        pass

    @abstractmethod
    async def find_by_topic(
        self,
        topic_id: TopicId,
        order: PostOrderBy = PostOrderBy.STANDARD,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Post]:
        """Find the replies of a topic.

        Args:
            topic_id: Topic ID
            order: Reply ordering
            limit: Page size, None for all replies
            offset: Number of replies to skip

        Returns:
            Replies in the requested order
        """
        pass

    @abstractmethod
    async def count_by_topic(self, topic_id: TopicId) -> int:
        """Count the replies of a topic (starter excluded)."""
        pass

    @abstractmethod
    async def adjust_vote_count(self, post_id: PostId, delta: int) -> int:
        """Atomically add ``delta`` to a post's vote count.

        Args:
            post_id: Post ID
            delta: +1 or -1

        Returns:
            The new vote count
        """
        pass
