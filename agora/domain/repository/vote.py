"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.vote import Vote
from agora.domain.value import MemberId, PostId


class VoteRepository(ABC):
    """Repository for Vote entity."""

    @abstractmethod
    async def find_by_member_and_post(
        self, member_id: MemberId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a member's vote on a post.

        Args:
            member_id: The voter
            post_id: The post

        Returns:
            The vote if one was cast, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all votes on a post."""
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: Sequence[PostId]) -> list[Vote]:
        """Find all votes on several posts (batch query).

        Args:
            post_ids: Posts to load votes for

        Returns:
            Votes on any of the posts
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the member already voted on the post
        """
        pass
