"""Spam check domain service."""

import logfire

from agora.domain.model import Member, Topic

from .base import Service


class SpamClassifier:
    """Generic spam classifier interface."""

    async def is_spam(
        self,
        content: str,
        author_name: str,
        author_email: str | None = None,
        permalink: str | None = None,
        user_ip: str | None = None,
    ) -> bool:
        """Classify a piece of user content.

        Args:
            content: Submitted text
            author_name: Display name of the author
            author_email: Email address of the author, if known
            permalink: Absolute URL of the content, if known
            user_ip: IP address the content was submitted from, if known

        Returns:
            True if the content looks like spam
        """
        raise NotImplementedError


class SpamService(Service):
    """Checks new topics against the configured spam classifier."""

    def __init__(self, classifier: SpamClassifier) -> None:
        self.classifier = classifier

    async def is_spam(
        self,
        topic: Topic,
        content: str,
        author: Member,
        permalink: str | None = None,
        user_ip: str | None = None,
    ) -> bool:
        """Whether a new topic should be held for moderation as spam."""
        with logfire.span("spam_service.is_spam", topic_id=str(topic.id)):
            spam = await self.classifier.is_spam(
                f"{topic.name}\n\n{content}",
                author_name=author.username,
                author_email=author.email,
                permalink=permalink,
                user_ip=user_ip,
            )
            if spam:
                logfire.warn(
                    "Topic flagged as spam",
                    topic_id=str(topic.id),
                    member_id=str(author.id),
                )
            return spam
