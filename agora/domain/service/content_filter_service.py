"""Banned word and banned link filtering."""

import re

import logfire

from agora.domain.repository import BannedContentRepository

from .base import Service


class ContentFilterService(Service):
    """Applies the forum's banned word and banned link lists to user content."""

    def __init__(self, banned_content_repository: BannedContentRepository) -> None:
        self.banned_content_repository = banned_content_repository

    async def sanitise_banned_words(self, text: str) -> str:
        """Replace every banned word in ``text`` with asterisks.

        Matching is case-insensitive and on whole words; each match is
        replaced by as many ``*`` as it has characters.
        """
        banned = await self.banned_content_repository.find_banned_words()
        words = [w.strip() for w in banned if w.strip()]
        if not words or not text:
            return text

        pattern = re.compile(
            r"(?<!\w)(" + "|".join(re.escape(w) for w in words) + r")(?!\w)",
            re.IGNORECASE,
        )
        sanitised, replaced = pattern.subn(lambda m: "*" * len(m.group(0)), text)
        if replaced:
            logfire.info("Banned words replaced", count=replaced)
        return sanitised

    async def contains_banned_link(self, text: str) -> bool:
        """Whether ``text`` mentions any banned link domain."""
        if not text:
            return False

        lowered = text.lower()
        for domain in await self.banned_content_repository.find_banned_links():
            domain = domain.strip().lower()
            if domain and domain in lowered:
                logfire.warn("Banned link found", domain=domain)
                return True
        return False
