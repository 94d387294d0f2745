"""Poll attached to a topic."""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import MemberId, PollAnswerId, PollId, PollVoteId


class Poll(DomainModel):
    """Poll created alongside a topic."""

    id: PollId
    member_id: MemberId
    created_at: datetime = Field(default_factory=datetime.now)


class PollAnswer(DomainModel):
    """One selectable answer of a poll."""

    id: PollAnswerId
    poll_id: PollId
    answer: str = Field(min_length=1, max_length=600)


class PollVote(DomainModel):
    """A member's choice of a poll answer."""

    id: PollVoteId
    answer_id: PollAnswerId
    member_id: MemberId
    voted_at: datetime = Field(default_factory=datetime.now)
