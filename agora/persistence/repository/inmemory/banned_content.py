"""In-memory banned word and link lists for testing."""

from agora.domain.repository.banned_content import BannedContentRepository

from .database import InMemoryDatabase


class InMemoryBannedContentRepository(BannedContentRepository):
    """In-memory implementation of BannedContentRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_banned_words(self) -> list[str]:
        return list(self.database.banned_words)

    async def find_banned_links(self) -> list[str]:
        return list(self.database.banned_links)

    async def add_banned_word(self, word: str) -> None:
        if word not in self.database.banned_words:
            self.database.banned_words.append(word)

    async def add_banned_link(self, domain: str) -> None:
        if domain not in self.database.banned_links:
            self.database.banned_links.append(domain)
