"""Shared state for the in-memory repositories."""

import copy
from dataclasses import dataclass, field, fields

from agora.domain.model import (
    Category,
    CategoryPermission,
    CategorySubscription,
    Email,
    Member,
    MemberPoints,
    Poll,
    PollAnswer,
    PollVote,
    Post,
    Topic,
    TopicSubscription,
    Vote,
)
from agora.domain.value import CategoryId, MemberId, PollId, PostId, TopicId


@dataclass
class InMemoryDatabase:
    """Every table the in-memory repositories read and write.

    Repositories created for the same database see each other's writes, the
    way Postgres repositories sharing a session do.
    """

    members: dict[MemberId, Member] = field(default_factory=dict)
    member_points: list[MemberPoints] = field(default_factory=list)
    categories: dict[CategoryId, Category] = field(default_factory=dict)
    category_permissions: list[CategoryPermission] = field(default_factory=list)
    topics: dict[TopicId, Topic] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    votes: list[Vote] = field(default_factory=list)
    polls: dict[PollId, Poll] = field(default_factory=dict)
    poll_answers: list[PollAnswer] = field(default_factory=list)
    poll_votes: list[PollVote] = field(default_factory=list)
    topic_subscriptions: list[TopicSubscription] = field(default_factory=list)
    category_subscriptions: list[CategorySubscription] = field(default_factory=list)
    emails: list[Email] = field(default_factory=list)
    banned_words: list[str] = field(default_factory=list)
    banned_links: list[str] = field(default_factory=list)

    def snapshot(self) -> dict:
        """Copy of every table, for ``restore``."""
        return {f.name: copy.copy(getattr(self, f.name)) for f in fields(self)}

    def restore(self, snapshot: dict) -> None:
        """Put every table back to the state captured by ``snapshot``."""
        for name, value in snapshot.items():
            setattr(self, name, copy.copy(value))
