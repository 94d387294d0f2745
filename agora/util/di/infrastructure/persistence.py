"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agora.config import Settings
from agora.domain.repository import (
    BannedContentRepository,
    CategoryRepository,
    EmailRepository,
    MemberPointsRepository,
    MemberRepository,
    PollRepository,
    PostRepository,
    SubscriptionRepository,
    TopicRepository,
    UnitOfWork,
    VoteRepository,
)
from agora.persistence.database import create_engine, create_session_factory
from agora.persistence.repository import (
    PostgresBannedContentRepository,
    PostgresCategoryRepository,
    PostgresEmailRepository,
    PostgresMemberPointsRepository,
    PostgresMemberRepository,
    PostgresPollRepository,
    PostgresPostRepository,
    PostgresSubscriptionRepository,
    PostgresTopicRepository,
    PostgresVoteRepository,
)
from agora.persistence.unit_of_work import PostgresUnitOfWork
from agora.util.di.base import ProviderBase
from agora.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Nothing is committed here: writes are committed by the use case's
        unit of work, anything left uncommitted is rolled back on close.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide the request's unit of work."""
        return PostgresUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self, session: AsyncSession) -> MemberRepository:
        """Provide Member repository."""
        return PostgresMemberRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_member_points_repository(
        self, session: AsyncSession
    ) -> MemberPointsRepository:
        """Provide points ledger repository."""
        return PostgresMemberPointsRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, session: AsyncSession) -> CategoryRepository:
        """Provide Category repository."""
        return PostgresCategoryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, session: AsyncSession) -> TopicRepository:
        """Provide Topic repository."""
        return PostgresTopicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_poll_repository(self, session: AsyncSession) -> PollRepository:
        """Provide Poll repository."""
        return PostgresPollRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subscription_repository(
        self, session: AsyncSession
    ) -> SubscriptionRepository:
        """Provide Subscription repository."""
        return PostgresSubscriptionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_email_repository(self, session: AsyncSession) -> EmailRepository:
        """Provide email queue repository."""
        return PostgresEmailRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_banned_content_repository(
        self, session: AsyncSession
    ) -> BannedContentRepository:
        """Provide banned word and link repository."""
        return PostgresBannedContentRepository(session)
