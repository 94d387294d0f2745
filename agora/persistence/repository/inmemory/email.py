"""In-memory email queue for testing."""

from typing import Sequence

from agora.domain.model.email import Email
from agora.domain.repository.email import EmailRepository

from .database import InMemoryDatabase


class InMemoryEmailRepository(EmailRepository):
    """In-memory implementation of EmailRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def enqueue(self, emails: Sequence[Email]) -> None:
        self.database.emails.extend(emails)

    async def find_queued(self) -> list[Email]:
        return sorted(self.database.emails, key=lambda e: e.created_at)
