"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from agora.domain.model.vote import Vote
from agora.domain.repository.vote import VoteRepository
from agora.domain.value import MemberId, PostId

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_member_and_post(
        self, member_id: MemberId, post_id: PostId
    ) -> Optional[Vote]:
        for vote in self.database.votes:
            if vote.member_id == member_id and vote.post_id == post_id:
                return vote
        return None

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        return [v for v in self.database.votes if v.post_id == post_id]

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> list[Vote]:
        if not post_ids:
            return []

        wanted = set(post_ids)
        return [v for v in self.database.votes if v.post_id in wanted]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the member already voted on the post
        """
        if any(
            v.member_id == vote.member_id and v.post_id == vote.post_id
            for v in self.database.votes
        ):
            raise IntegrityError("Duplicate vote", None, Exception())

        self.database.votes.append(vote)
        return vote
