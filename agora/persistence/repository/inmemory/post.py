"""In-memory post repository for testing."""

from typing import Optional

from agora.domain.model.post import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId, PostOrderBy, TopicId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self.database.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save a post, keeping the stored vote count on updates."""
        existing = self.database.posts.get(post.id)
        if existing is not None:
            post = post.model_copy(update={"vote_count": existing.vote_count})
        self.database.posts[post.id] = post
        return post

    async def find_topic_starter(self, topic_id: TopicId) -> Optional[Post]:
        for post in self.database.posts.values():
            if post.topic_id == topic_id and post.is_topic_starter:
                return post
        return None

    async def find_by_topic(
        self,
        topic_id: TopicId,
        order: PostOrderBy = PostOrderBy.STANDARD,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Post]:
        posts = [
            p
            for p in self.database.posts.values()
            if p.topic_id == topic_id and not p.is_topic_starter
        ]

        if order == PostOrderBy.NEWEST:
            posts.sort(key=lambda p: p.created_at, reverse=True)
        elif order == PostOrderBy.VOTES:
            posts.sort(key=lambda p: (-p.vote_count, p.created_at))
        else:
            posts.sort(key=lambda p: p.created_at)

        if limit is None:
            return posts[offset:]
        return posts[offset : offset + limit]

    async def count_by_topic(self, topic_id: TopicId) -> int:
        return sum(
            1
            for p in self.database.posts.values()
            if p.topic_id == topic_id and not p.is_topic_starter
        )

    async def adjust_vote_count(self, post_id: PostId, delta: int) -> int:
        post = self.database.posts[post_id]
        updated = post.model_copy(update={"vote_count": post.vote_count + delta})
        self.database.posts[post_id] = updated
        return updated.vote_count
