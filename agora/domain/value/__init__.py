"""Domain value objects for the forum."""

from agora.domain.value.identifiers import (
    CategoryId,
    EmailId,
    MemberId,
    MemberPointsId,
    PollAnswerId,
    PollId,
    PollVoteId,
    PostId,
    SubscriptionId,
    TopicId,
    VoteId,
)
from agora.domain.value.types import (
    MemberGroup,
    Permission,
    PermissionSet,
    PostOrderBy,
    Slug,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "MemberId",
    "CategoryId",
    "TopicId",
    "PostId",
    "VoteId",
    "MemberPointsId",
    "PollId",
    "PollAnswerId",
    "PollVoteId",
    "SubscriptionId",
    "EmailId",
    # Types
    "MemberGroup",
    "Permission",
    "PermissionSet",
    "PostOrderBy",
    "Slug",
    "VoteDirection",
]
