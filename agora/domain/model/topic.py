"""Topic aggregate root.

A topic is a discussion thread owning an ordered sequence of posts. The
first post is the topic starter.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CategoryId, MemberId, PollId, PostId, Slug, TopicId


class Topic(DomainModel):
    """Topic aggregate root.

    Pending topics are hidden from topic lists until an admin approves them.
    """

    id: TopicId
    name: str = Field(min_length=1, max_length=450)
    slug: Slug
    category_id: CategoryId
    member_id: MemberId
    views: int = Field(default=0, ge=0)
    solved: bool = False
    pending: bool = False
    poll_id: Optional[PollId] = None
    last_post_id: Optional[PostId] = None
    created_at: datetime = Field(default_factory=datetime.now)
