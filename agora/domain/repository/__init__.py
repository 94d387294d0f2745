"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from agora.domain.repository.banned_content import BannedContentRepository
from agora.domain.repository.category import CategoryRepository
from agora.domain.repository.email import EmailRepository
from agora.domain.repository.member import MemberRepository
from agora.domain.repository.member_points import MemberPointsRepository
from agora.domain.repository.poll import PollRepository
from agora.domain.repository.post import PostRepository
from agora.domain.repository.subscription import SubscriptionRepository
from agora.domain.repository.topic import TopicRepository
from agora.domain.repository.unit_of_work import UnitOfWork
from agora.domain.repository.vote import VoteRepository

__all__ = [
    "BannedContentRepository",
    "CategoryRepository",
    "EmailRepository",
    "MemberRepository",
    "MemberPointsRepository",
    "PollRepository",
    "PostRepository",
    "SubscriptionRepository",
    "TopicRepository",
    "UnitOfWork",
    "VoteRepository",
]
