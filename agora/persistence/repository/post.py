"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, PostOrderBy, TopicId
from agora.persistence.mappers import post_to_dict, row_to_post
from agora.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)

            existing = await self.find_by_id(post.id)
            if existing:
                # Vote count is only ever changed through adjust_vote_count
                post_dict.pop("vote_count")
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = insert(posts_table).values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def find_topic_starter(self, topic_id: TopicId) -> Optional[Post]:
        """Find the first post of a topic."""
        stmt = (
            select(posts_table)
            .where(
                and_(
                    posts_table.c.topic_id == topic_id,
                    posts_table.c.is_topic_starter.is_(True),
                )
            )
            .order_by(posts_table.c.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_topic(
        self,
        topic_id: TopicId,
        order: PostOrderBy = PostOrderBy.STANDARD,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Find the replies of a topic."""
        with logfire.span(
            "post_repository.find_by_topic",
            topic_id=str(topic_id),
            order=order.value,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table).where(
                and_(
                    posts_table.c.topic_id == topic_id,
                    posts_table.c.is_topic_starter.is_(False),
                )
            )

            if order == PostOrderBy.NEWEST:
                stmt = stmt.order_by(posts_table.c.created_at.desc())
            elif order == PostOrderBy.VOTES:
                stmt = stmt.order_by(
                    posts_table.c.vote_count.desc(), posts_table.c.created_at
                )
            else:
                stmt = stmt.order_by(posts_table.c.created_at)

            if limit is not None:
                stmt = stmt.limit(limit)
            if offset:
                stmt = stmt.offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count_by_topic(self, topic_id: TopicId) -> int:
        """Count the replies of a topic."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(
                and_(
                    posts_table.c.topic_id == topic_id,
                    posts_table.c.is_topic_starter.is_(False),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def adjust_vote_count(self, post_id: PostId, delta: int) -> int:
        """Atomically add ``delta`` to the vote count."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(vote_count=posts_table.c.vote_count + delta)
            .returning(posts_table.c.vote_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one()
