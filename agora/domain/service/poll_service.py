"""Poll domain service."""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from agora.domain.model import Member, Poll, PollAnswer
from agora.domain.repository import PollRepository
from agora.domain.value import MemberId, PollAnswerId, PollId

from .base import Service


@dataclass
class PollSummary:
    """What a topic page shows about its poll."""

    poll: Poll
    answers: list[PollAnswer]
    votes_per_answer: dict[PollAnswerId, int]
    total_votes: int
    viewer_has_voted: bool


class PollService(Service):
    """Domain service for topic polls."""

    def __init__(self, poll_repository: PollRepository) -> None:
        self.poll_repository = poll_repository

    async def create_poll(self, member: Member, answers: Sequence[str]) -> Poll:
        """Create a poll with one answer per non-blank entry of ``answers``.

        Args:
            member: Poll owner
            answers: Answer texts

        Returns:
            The saved poll
        """
        poll = await self.poll_repository.save(
            Poll(id=PollId(uuid4()), member_id=member.id, created_at=datetime.now())
        )
        count = 0
        for text in answers:
            text = text.strip()
            if not text:
                continue
            await self.poll_repository.save_answer(
                PollAnswer(id=PollAnswerId(uuid4()), poll_id=poll.id, answer=text)
            )
            count += 1

        logfire.info("Poll created", poll_id=str(poll.id), answers=count)
        return poll

    async def get_summary(
        self, poll_id: PollId, viewer_id: MemberId | None
    ) -> PollSummary | None:
        """Summarise a poll for a viewer.

        Returns:
            The summary, or None if the poll no longer exists
        """
        poll = await self.poll_repository.find_by_id(poll_id)
        if poll is None:
            logfire.warn("Topic poll missing", poll_id=str(poll_id))
            return None

        answers = await self.poll_repository.find_answers(poll_id)
        votes = await self.poll_repository.find_votes(poll_id)

        votes_per_answer = Counter(vote.answer_id for vote in votes)

        return PollSummary(
            poll=poll,
            answers=answers,
            votes_per_answer=votes_per_answer,
            total_votes=len(votes),
            viewer_has_voted=viewer_id is not None
            and any(vote.member_id == viewer_id for vote in votes),
        )
