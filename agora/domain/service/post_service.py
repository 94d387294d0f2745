"""Post domain service."""

import math
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model import Member, Post, Topic
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, PostOrderBy, TopicId

from .base import Service


@dataclass
class PostPage:
    """One page of a topic's replies."""

    posts: list[Post]
    page_index: int
    total_count: int
    total_pages: int


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def find_by_id(self, post_id: PostId) -> Post | None:
        return await self.post_repository.find_by_id(post_id)

    async def get_topic_starter(self, topic_id: TopicId) -> Post:
        """Get the first post of a topic.

        Raises:
            NotFoundError: If the topic has no starter post
        """
        post = await self.post_repository.find_topic_starter(topic_id)
        if not post:
            logfire.error("Topic has no starter post", topic_id=str(topic_id))
            raise NotFoundError("Topic starter post", str(topic_id))
        return post

    async def get_paged_posts_by_topic(
        self,
        topic_id: TopicId,
        page_index: int,
        page_size: int,
        order: PostOrderBy = PostOrderBy.STANDARD,
    ) -> PostPage:
        """Get one page of a topic's replies.

        ``PostOrderBy.ALL`` ignores ``page_size`` and returns every reply on
        the first page.

        Args:
            topic_id: Topic ID
            page_index: 1-based page number (values below 1 mean page 1)
            page_size: Replies per page
            order: Reply ordering

        Returns:
            The requested page
        """
        page_index = max(page_index, 1)
        with logfire.span(
            "post_service.get_paged_posts_by_topic",
            topic_id=str(topic_id),
            page_index=page_index,
            order=order.value,
        ):
            total_count = await self.post_repository.count_by_topic(topic_id)

            if order == PostOrderBy.ALL:
                posts = await self.post_repository.find_by_topic(topic_id, order)
                return PostPage(
                    posts=posts,
                    page_index=1,
                    total_count=total_count,
                    total_pages=1 if total_count else 0,
                )

            posts = await self.post_repository.find_by_topic(
                topic_id,
                order,
                limit=page_size,
                offset=(page_index - 1) * page_size,
            )
            return PostPage(
                posts=posts,
                page_index=page_index,
                total_count=total_count,
                total_pages=math.ceil(total_count / page_size) if page_size else 0,
            )

    async def add_post(
        self,
        topic: Topic,
        member: Member,
        content: str,
        is_topic_starter: bool = False,
    ) -> Post:
        """Create a post in a topic.

        Args:
            topic: Topic the post belongs to
            member: Author
            content: Post content (already sanitised)
            is_topic_starter: Whether this is the topic's first post

        Returns:
            The saved post
        """
        now = datetime.now()
        post = Post(
            id=PostId(uuid4()),
            topic_id=topic.id,
            member_id=member.id,
            content=content,
            is_topic_starter=is_topic_starter,
            created_at=now,
            updated_at=now,
        )
        saved = await self.post_repository.save(post)
        logfire.info(
            "Post created",
            post_id=str(saved.id),
            topic_id=str(topic.id),
            is_topic_starter=is_topic_starter,
        )
        return saved

    async def mark_as_solution(self, post: Post) -> Post:
        updated = post.model_copy(
            update={"is_solution": True, "updated_at": datetime.now()}
        )
        return await self.post_repository.save(updated)

    async def adjust_vote_count(self, post_id: PostId, delta: int) -> int:
        """Atomically move a post's vote count by ``delta``.

        Returns:
            The new vote count
        """
        with logfire.span(
            "post_service.adjust_vote_count", post_id=str(post_id), delta=delta
        ):
            return await self.post_repository.adjust_vote_count(post_id, delta)
