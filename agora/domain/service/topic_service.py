"""Topic domain service."""

import re
from datetime import datetime
from uuid import uuid4

import logfire

from agora.config import PointsSettings
from agora.domain.error import NotFoundError
from agora.domain.model import Category, Member, Post, Topic
from agora.domain.repository import TopicRepository
from agora.domain.value import PollId, Slug, TopicId

from .base import Service
from .member_points_service import MemberPointsService
from .post_service import PostService


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(
        self,
        topic_repository: TopicRepository,
        post_service: PostService,
        member_points_service: MemberPointsService,
        points_settings: PointsSettings,
    ) -> None:
        self.topic_repository = topic_repository
        self.post_service = post_service
        self.member_points_service = member_points_service
        self.points_settings = points_settings

    async def get_by_id(self, topic_id: TopicId) -> Topic:
        """Get a topic by ID.

        Raises:
            NotFoundError: If topic not found
        """
        topic = await self.topic_repository.find_by_id(topic_id)
        if not topic:
            logfire.warn("Topic not found", topic_id=str(topic_id))
            raise NotFoundError("Topic", str(topic_id))
        return topic

    async def get_by_slug(self, slug: str) -> Topic | None:
        """Get a topic by slug.

        Malformed slugs are treated as unknown topics.
        """
        with logfire.span("topic_service.get_by_slug", slug=slug):
            try:
                value = Slug(slug)
            except ValueError:
                logfire.info("Malformed topic slug", slug=slug)
                return None

            topic = await self.topic_repository.find_by_slug(value)
            if not topic:
                logfire.info("Topic not found by slug", slug=slug)
            return topic

    async def get_recent_topics(self, limit: int) -> list[Topic]:
        """Get the most recent live topics, newest first."""
        return await self.topic_repository.find_recent(limit)

    async def create_topic(
        self,
        name: str,
        category: Category,
        member: Member,
        pending: bool = False,
        poll_id: PollId | None = None,
    ) -> Topic:
        """Create a topic with a unique slug.

        Args:
            name: Topic name (already sanitised)
            category: Category the topic is filed in
            member: Topic creator
            pending: Whether the topic awaits moderation
            poll_id: Poll attached to the topic, if any

        Returns:
            The saved topic
        """
        topic_id = TopicId(uuid4())
        with logfire.span(
            "topic_service.create_topic", topic_id=str(topic_id), name=name
        ):
            slug = await self.generate_unique_slug(name, topic_id)
            topic = Topic(
                id=topic_id,
                name=name,
                slug=slug,
                category_id=category.id,
                member_id=member.id,
                pending=pending,
                poll_id=poll_id,
                created_at=datetime.now(),
            )
            saved = await self.topic_repository.save(topic)
            logfire.info(
                "Topic created", topic_id=str(saved.id), slug=str(saved.slug)
            )
            return saved

    async def add_starter_post(
        self, topic: Topic, member: Member, content: str
    ) -> tuple[Topic, Post]:
        """Create the first post of a topic and credit its author.

        Returns:
            The topic (with ``last_post_id`` set) and the new post
        """
        post = await self.post_service.add_post(
            topic, member, content, is_topic_starter=True
        )
        topic = await self.topic_repository.save(
            topic.model_copy(update={"last_post_id": post.id})
        )
        await self.member_points_service.add(
            member.id,
            self.points_settings.points_added_per_new_post,
            related_post_id=post.id,
        )
        return topic, post

    async def mark_pending(self, topic: Topic) -> Topic:
        return await self.topic_repository.save(
            topic.model_copy(update={"pending": True})
        )

    async def approve(self, topic: Topic) -> Topic:
        """Clear the pending flag so the topic is listed."""
        approved = await self.topic_repository.save(
            topic.model_copy(update={"pending": False})
        )
        logfire.info("Topic approved", topic_id=str(topic.id))
        return approved

    async def increment_views(self, topic: Topic) -> None:
        await self.topic_repository.increment_views(topic.id)

    async def solve_topic(
        self, topic: Topic, post: Post, marker: Member, solution_writer: Member
    ) -> bool:
        """Mark ``post`` as the accepted solution of ``topic``.

        Only the topic's creator may mark a solution, and a topic is solved
        once. The solution's author is credited unless they marked their own
        post.

        Args:
            topic: Topic being solved
            post: Post accepted as the solution
            marker: Member marking the solution
            solution_writer: Author of ``post``

        Returns:
            True if the topic was solved by this call
        """
        with logfire.span(
            "topic_service.solve_topic",
            topic_id=str(topic.id),
            post_id=str(post.id),
            marker_id=str(marker.id),
        ):
            if topic.member_id != marker.id:
                logfire.warn(
                    "Solution marked by non-owner",
                    topic_id=str(topic.id),
                    marker_id=str(marker.id),
                )
                return False

            if topic.solved:
                logfire.info("Topic already solved", topic_id=str(topic.id))
                return False

            if post.topic_id != topic.id:
                logfire.warn(
                    "Solution post belongs to another topic",
                    topic_id=str(topic.id),
                    post_id=str(post.id),
                )
                return False

            await self.post_service.mark_as_solution(post)
            await self.topic_repository.save(topic.model_copy(update={"solved": True}))

            if marker.id != solution_writer.id:
                await self.member_points_service.add(
                    solution_writer.id,
                    self.points_settings.points_added_for_solution,
                    related_post_id=post.id,
                )

            logfire.info("Topic solved", topic_id=str(topic.id), post_id=str(post.id))
            return True

    async def generate_unique_slug(self, name: str, topic_id: TopicId) -> Slug:
        """Generate a unique slug from a topic name.

        Handles collisions by appending numeric suffixes.

        Args:
            name: Topic name to slugify
            topic_id: Topic ID (used for fallback if name produces empty slug)

        Returns:
            Unique slug for the topic
        """
        base_slug = self._slugify(name)

        if not base_slug:
            return Slug(f"topic-{topic_id.hex[:8]}")

        slug_str = base_slug
        counter = 1
        while await self.topic_repository.slug_exists(Slug(slug_str)):
            suffix = f"-{counter}"
            slug_str = base_slug[: 100 - len(suffix)].rstrip("-") + suffix
            counter += 1

        return Slug(slug_str)

    @staticmethod
    def _slugify(name: str) -> str:
        """Convert a name to a URL-safe slug (may be empty)."""
        slug = re.sub(r"[^a-z0-9]+", "-", name.lower())
        return slug.strip("-")[:100].rstrip("-")
