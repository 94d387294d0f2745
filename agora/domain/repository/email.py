"""Email queue repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from agora.domain.model.email import Email


class EmailRepository(ABC):
    """Outbound email queue."""

    @abstractmethod
    async def enqueue(self, emails: Sequence[Email]) -> None:
        """Queue emails for delivery."""
        pass

    @abstractmethod
    async def find_queued(self) -> list[Email]:
        """Find all queued emails, oldest first."""
        pass
