"""Akismet spam classifier.

Uses the Akismet ``comment-check`` endpoint. Akismet answers with the bare
text ``true`` for spam and ``false`` for ham.
"""

import httpx
import logfire

from agora.adapter.error import ExternalServiceError
from agora.domain.service.spam_service import SpamClassifier


class AkismetError(ExternalServiceError):
    """Akismet request error."""

    def __init__(self, message: str):
        super().__init__("akismet", message)


class AkismetSpamClassifier(SpamClassifier):
    """Base class for Akismet classifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealAkismetSpamClassifier(AkismetSpamClassifier):
    """Akismet classifier calling the REST API.

    With no API key every check passes without a request.
    """

    def __init__(
        self,
        api_key: str | None,
        blog_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Akismet classifier.

        Args:
            api_key: Akismet API key (None disables checking)
            blog_url: Forum root URL registered with Akismet
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.api_key = api_key
        self.blog_url = blog_url
        self.timeout = timeout
        self.transport = transport

    @property
    def check_url(self) -> str:
        return f"https://{self.api_key}.rest.akismet.com/1.1/comment-check"

    async def is_spam(
        self,
        content: str,
        author_name: str,
        author_email: str | None = None,
        permalink: str | None = None,
        user_ip: str | None = None,
    ) -> bool:
        """Ask Akismet whether the content is spam.

        Network and protocol failures are logged and the content is let
        through: a spam check must never block posting.
        """
        if not self.api_key:
            return False

        data = {
            "blog": self.blog_url,
            "user_ip": user_ip or "",
            "comment_type": "forum-post",
            "comment_author": author_name,
            "comment_content": content,
        }
        if author_email:
            data["comment_author_email"] = author_email
        if permalink:
            data["permalink"] = permalink

        with logfire.span("akismet.comment_check"):
            try:
                return await self._comment_check(data)
            except AkismetError as e:
                logfire.error("Akismet check failed", error=str(e))
                return False

    async def _comment_check(self, data: dict[str, str]) -> bool:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(self.check_url, data=data)
        except httpx.HTTPError as e:
            raise AkismetError(f"HTTP error during comment check: {e}")

        if response.status_code != 200:
            raise AkismetError(
                f"Comment check failed with status {response.status_code}"
            )

        verdict = response.text.strip().lower()
        if verdict not in ("true", "false"):
            # Akismet puts the reason in a debug header
            help_text = response.headers.get("X-akismet-debug-help", verdict)
            raise AkismetError(f"Unexpected comment check response: {help_text}")

        return verdict == "true"


class MockAkismetSpamClassifier(AkismetSpamClassifier):
    """Mock classifier for testing.

    Flags content or emails containing Akismet's documented test marker, so
    tests can trigger the spam path deterministically.
    """

    SPAM_MARKER = "akismet-guaranteed-spam"

    def __init__(self) -> None:
        self.checked: list[str] = []

    async def is_spam(
        self,
        content: str,
        author_name: str,
        author_email: str | None = None,
        permalink: str | None = None,
        user_ip: str | None = None,
    ) -> bool:
        self.checked.append(content)
        return self.SPAM_MARKER in content or self.SPAM_MARKER in (author_email or "")
