"""Domain model entities for the forum."""

from agora.domain.model.category import Category, CategoryPermission
from agora.domain.model.email import Email
from agora.domain.model.member import Member
from agora.domain.model.member_points import MemberPoints
from agora.domain.model.poll import Poll, PollAnswer, PollVote
from agora.domain.model.post import Post
from agora.domain.model.subscription import CategorySubscription, TopicSubscription
from agora.domain.model.topic import Topic
from agora.domain.model.vote import Vote

__all__ = [
    "Member",
    "MemberPoints",
    "Category",
    "CategoryPermission",
    "Topic",
    "Post",
    "Vote",
    "Poll",
    "PollAnswer",
    "PollVote",
    "TopicSubscription",
    "CategorySubscription",
    "Email",
]
