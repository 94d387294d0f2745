"""Post entity.

A single message within a topic.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import MemberId, PostId, TopicId


class Post(DomainModel):
    """Post entity.

    ``vote_count`` is the net score: the signed sum of the amounts of all
    votes cast on the post.
    """

    id: PostId
    topic_id: TopicId
    member_id: MemberId
    content: str = Field(min_length=1)
    vote_count: int = 0
    is_solution: bool = False
    is_topic_starter: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
