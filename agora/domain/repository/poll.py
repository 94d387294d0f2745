"""Poll repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.poll import Poll, PollAnswer, PollVote
from agora.domain.value import PollId


class PollRepository(ABC):
    """Repository for polls, their answers and votes."""

    @abstractmethod
    async def save(self, poll: Poll) -> Poll:
        """Save a poll."""
        pass

    @abstractmethod
    async def save_answer(self, answer: PollAnswer) -> PollAnswer:
        """Save a poll answer."""
        pass

    @abstractmethod
    async def save_vote(self, vote: PollVote) -> PollVote:
        """Save a vote on a poll answer."""
        pass

    @abstractmethod
    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        pass

    @abstractmethod
    async def find_answers(self, poll_id: PollId) -> list[PollAnswer]:
        """Find the answers of a poll."""
        pass

    @abstractmethod
    async def find_votes(self, poll_id: PollId) -> list[PollVote]:
        """Find all votes cast on any answer of a poll."""
        pass
