"""In-memory repository implementations for testing."""

from .banned_content import InMemoryBannedContentRepository
from .category import InMemoryCategoryRepository
from .database import InMemoryDatabase
from .email import InMemoryEmailRepository
from .member import InMemoryMemberRepository
from .member_points import InMemoryMemberPointsRepository
from .poll import InMemoryPollRepository
from .post import InMemoryPostRepository
from .subscription import InMemorySubscriptionRepository
from .topic import InMemoryTopicRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryBannedContentRepository",
    "InMemoryCategoryRepository",
    "InMemoryDatabase",
    "InMemoryEmailRepository",
    "InMemoryMemberRepository",
    "InMemoryMemberPointsRepository",
    "InMemoryPollRepository",
    "InMemoryPostRepository",
    "InMemorySubscriptionRepository",
    "InMemoryTopicRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
