"""PostgreSQL repository implementations."""

from agora.persistence.repository.banned_content import PostgresBannedContentRepository
from agora.persistence.repository.category import PostgresCategoryRepository
from agora.persistence.repository.email import PostgresEmailRepository
from agora.persistence.repository.member import PostgresMemberRepository
from agora.persistence.repository.member_points import PostgresMemberPointsRepository
from agora.persistence.repository.poll import PostgresPollRepository
from agora.persistence.repository.post import PostgresPostRepository
from agora.persistence.repository.subscription import PostgresSubscriptionRepository
from agora.persistence.repository.topic import PostgresTopicRepository
from agora.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresBannedContentRepository",
    "PostgresCategoryRepository",
    "PostgresEmailRepository",
    "PostgresMemberRepository",
    "PostgresMemberPointsRepository",
    "PostgresPollRepository",
    "PostgresPostRepository",
    "PostgresSubscriptionRepository",
    "PostgresTopicRepository",
    "PostgresVoteRepository",
]
