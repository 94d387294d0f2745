"""Banned words and links repository interface."""

from abc import ABC, abstractmethod


class BannedContentRepository(ABC):
    """Repository for the banned word and banned link lists."""

    @abstractmethod
    async def find_banned_words(self) -> list[str]:
        """Return all banned words."""
        pass

    @abstractmethod
    async def find_banned_links(self) -> list[str]:
        """Return all banned link domains."""
        pass

    @abstractmethod
    async def add_banned_word(self, word: str) -> None:
        """Add a word to the banned list."""
        pass

    @abstractmethod
    async def add_banned_link(self, domain: str) -> None:
        """Add a link domain to the banned list."""
        pass
