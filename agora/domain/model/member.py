"""Member aggregate root.

Members write topics and posts, vote on other members' posts, and build up
a points balance from the activity of the community.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import MemberGroup, MemberId


class Member(DomainModel):
    """Member aggregate root.

    ``points`` is the running balance; every change to it is recorded as a
    MemberPoints ledger entry.
    """

    id: MemberId
    username: str = Field(min_length=1, max_length=150)
    email: Optional[str] = None
    group: MemberGroup = MemberGroup.STANDARD
    points: int = 0
    post_count: int = Field(default=0, ge=0)
    is_locked_out: bool = False
    is_approved: bool = True
    disable_posting: bool = False
    disable_email_notifications: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.group == MemberGroup.ADMIN

    @property
    def has_access(self) -> bool:
        """Whether the account may act at all (not locked out, approved)."""
        return not self.is_locked_out and self.is_approved
