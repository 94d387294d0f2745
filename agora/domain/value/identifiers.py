"""Strongly typed identifiers for forum entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

MemberId = NewType("MemberId", UUID)
CategoryId = NewType("CategoryId", UUID)
TopicId = NewType("TopicId", UUID)
PostId = NewType("PostId", UUID)
VoteId = NewType("VoteId", UUID)
MemberPointsId = NewType("MemberPointsId", UUID)
PollId = NewType("PollId", UUID)
PollAnswerId = NewType("PollAnswerId", UUID)
PollVoteId = NewType("PollVoteId", UUID)
SubscriptionId = NewType("SubscriptionId", UUID)
EmailId = NewType("EmailId", UUID)
