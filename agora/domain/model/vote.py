"""Vote entity.

A signed endorsement (+1 / -1) cast by one member on one post.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import MemberId, PostId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per member per post (checked before insert and enforced by a
      database unique constraint)
    - Amount is +1 for an up-vote, -1 for a down-vote
    """

    id: VoteId
    post_id: PostId
    member_id: MemberId
    amount: Literal[1, -1]
    voted_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_positive(self) -> bool:
        return self.amount > 0
