"""Unit tests for the Akismet spam classifier."""

from urllib.parse import parse_qs

import httpx
import pytest

from agora.adapter.akismet import (
    MockAkismetSpamClassifier,
    RealAkismetSpamClassifier,
)


def _classifier(handler) -> RealAkismetSpamClassifier:
    return RealAkismetSpamClassifier(
        api_key="abc123",
        blog_url="https://forum.example.com",
        transport=httpx.MockTransport(handler),
    )


class TestRealAkismetSpamClassifier:
    """Tests for comment-check calls."""

    @pytest.mark.asyncio
    async def test_posts_comment_fields_and_reads_verdict(self):
        """A "true" answer means spam."""
        # Arrange
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, text="true")

        classifier = _classifier(handler)

        # Act
        result = await classifier.is_spam(
            "Buy now",
            "spammer",
            author_email="s@example.com",
            permalink="https://forum.example.com/topics/buy-now",
            user_ip="203.0.113.7",
        )

        # Assert
        assert result is True
        assert seen["url"] == "https://abc123.rest.akismet.com/1.1/comment-check"
        assert seen["form"]["comment_content"] == ["Buy now"]
        assert seen["form"]["comment_author"] == ["spammer"]
        assert seen["form"]["comment_author_email"] == ["s@example.com"]
        assert seen["form"]["comment_type"] == ["forum-post"]
        assert seen["form"]["user_ip"] == ["203.0.113.7"]
        assert seen["form"]["blog"] == ["https://forum.example.com"]

    @pytest.mark.asyncio
    async def test_false_verdict_is_ham(self):
        classifier = _classifier(lambda request: httpx.Response(200, text="false"))

        assert await classifier.is_spam("Hello", "alice") is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, text="oops"),
            httpx.Response(
                200, text="invalid", headers={"X-akismet-debug-help": "bad key"}
            ),
        ],
    )
    async def test_failures_let_content_through(self, response):
        classifier = _classifier(lambda request: response)

        assert await classifier.is_spam("Hello", "alice") is False

    @pytest.mark.asyncio
    async def test_network_error_lets_content_through(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        classifier = _classifier(handler)

        assert await classifier.is_spam("Hello", "alice") is False

    @pytest.mark.asyncio
    async def test_no_api_key_skips_request(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        classifier = RealAkismetSpamClassifier(
            api_key=None,
            blog_url="https://forum.example.com",
            transport=httpx.MockTransport(handler),
        )

        assert await classifier.is_spam("Hello", "alice") is False


class TestMockAkismetSpamClassifier:
    @pytest.mark.asyncio
    async def test_flags_marker_in_content_or_email(self):
        classifier = MockAkismetSpamClassifier()

        assert await classifier.is_spam("akismet-guaranteed-spam", "bob")
        assert await classifier.is_spam(
            "Hello", "bob", author_email="akismet-guaranteed-spam@example.com"
        )
        assert not await classifier.is_spam("Hello", "bob")
        assert len(classifier.checked) == 3
