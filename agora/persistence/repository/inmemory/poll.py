"""In-memory poll repository for testing."""

from typing import Optional

from agora.domain.model.poll import Poll, PollAnswer, PollVote
from agora.domain.repository.poll import PollRepository
from agora.domain.value import PollId

from .database import InMemoryDatabase


class InMemoryPollRepository(PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def save(self, poll: Poll) -> Poll:
        self.database.polls[poll.id] = poll
        return poll

    async def save_answer(self, answer: PollAnswer) -> PollAnswer:
        self.database.poll_answers.append(answer)
        return answer

    async def save_vote(self, vote: PollVote) -> PollVote:
        self.database.poll_votes.append(vote)
        return vote

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        return self.database.polls.get(poll_id)

    async def find_answers(self, poll_id: PollId) -> list[PollAnswer]:
        return [a for a in self.database.poll_answers if a.poll_id == poll_id]

    async def find_votes(self, poll_id: PollId) -> list[PollVote]:
        answer_ids = {a.id for a in self.database.poll_answers if a.poll_id == poll_id}
        return [v for v in self.database.poll_votes if v.answer_id in answer_ids]
