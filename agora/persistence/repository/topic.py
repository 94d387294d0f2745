"""PostgreSQL implementation of Topic repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Topic
from agora.domain.repository import TopicRepository
from agora.domain.value import Slug, TopicId
from agora.persistence.mappers import row_to_topic, topic_to_dict
from agora.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        stmt = select(topics_table).where(topics_table.c.id == topic_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Topic]:
        """Find a topic by slug."""
        with logfire.span("topic_repository.find_by_slug", slug=str(slug)):
            stmt = select(topics_table).where(topics_table.c.slug == str(slug))
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_topic(row._asdict()) if row else None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug is taken."""
        stmt = (
            select(func.count())
            .select_from(topics_table)
            .where(topics_table.c.slug == str(slug))
        )
        result = await self.session.execute(stmt)
        count = result.scalar()
        return (count or 0) > 0

    async def save(self, topic: Topic) -> Topic:
        """Save a topic (create or update)."""
        with logfire.span("topic_repository.save", topic_id=str(topic.id)):
            topic_dict = topic_to_dict(topic)

            existing = await self.find_by_id(topic.id)
            if existing:
                # Views are only ever changed through increment_views
                topic_dict.pop("views")
                stmt = (
                    update(topics_table)
                    .where(topics_table.c.id == topic.id)
                    .values(**topic_dict)
                )
            else:
                stmt = insert(topics_table).values(**topic_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return topic

    async def find_recent(self, limit: int) -> List[Topic]:
        """Find the most recent non-pending topics, newest first."""
        stmt = (
            select(topics_table)
            .where(topics_table.c.pending.is_(False))
            .order_by(topics_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def increment_views(self, topic_id: TopicId) -> None:
        """Atomically increment the view count by 1."""
        stmt = (
            update(topics_table)
            .where(topics_table.c.id == topic_id)
            .values(views=topics_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
