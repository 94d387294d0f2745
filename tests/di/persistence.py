"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from agora.persistence.repository.inmemory import (
    InMemoryBannedContentRepository,
    InMemoryCategoryRepository,
    InMemoryDatabase,
    InMemoryEmailRepository,
    InMemoryMemberPointsRepository,
    InMemoryMemberRepository,
    InMemoryPollRepository,
    InMemoryPostRepository,
    InMemorySubscriptionRepository,
    InMemoryTopicRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from agora.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database lives for the whole container, so HTTP requests served by
    one app see each other's writes. Each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory database."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, database: InMemoryDatabase) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork(database)

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self, database: InMemoryDatabase) -> MemberRepository:
        """Provide in-memory member repository."""
        return InMemoryMemberRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_member_points_repository(
        self, database: InMemoryDatabase
    ) -> MemberPointsRepository:
        """Provide in-memory points ledger repository."""
        return InMemoryMemberPointsRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(
        self, database: InMemoryDatabase
    ) -> CategoryRepository:
        """Provide in-memory category repository."""
        return InMemoryCategoryRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, database: InMemoryDatabase) -> TopicRepository:
        """Provide in-memory topic repository."""
        return InMemoryTopicRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, database: InMemoryDatabase) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, database: InMemoryDatabase) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_poll_repository(self, database: InMemoryDatabase) -> PollRepository:
        """Provide in-memory poll repository."""
        return InMemoryPollRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_subscription_repository(
        self, database: InMemoryDatabase
    ) -> SubscriptionRepository:
        """Provide in-memory subscription repository."""
        return InMemorySubscriptionRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_email_repository(self, database: InMemoryDatabase) -> EmailRepository:
        """Provide in-memory email queue."""
        return InMemoryEmailRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_banned_content_repository(
        self, database: InMemoryDatabase
    ) -> BannedContentRepository:
        """Provide in-memory banned words and links."""
        return InMemoryBannedContentRepository(database)
