"""Points ledger entry.

Append-only record of a change to a member's points balance.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import MemberId, MemberPointsId, PostId


class MemberPoints(DomainModel):
    """Ledger entry.

    Business rules:
    - Never updated or deleted once written
    - ``points`` is signed: negative entries are deductions
    """

    id: MemberPointsId
    member_id: MemberId
    points: int
    related_post_id: Optional[PostId] = None
    created_at: datetime = Field(default_factory=datetime.now)
