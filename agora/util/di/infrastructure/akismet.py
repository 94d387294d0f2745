"""Akismet infrastructure providers."""

from dishka import Scope, provide

from agora.adapter.akismet import RealAkismetSpamClassifier
from agora.config import Settings
from agora.domain.service.spam_service import SpamClassifier
from agora.util.di.base import ProviderBase


class AkismetProvider(ProviderBase):
    """Akismet component base."""

    __mock_component__ = "akismet"


class ProdAkismetProvider(AkismetProvider):
    """Production Akismet provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_spam_classifier(self, settings: Settings) -> SpamClassifier:
        """Provide Akismet spam classifier.

        Checks are skipped when ``SPAM__AKISMET_API_KEY`` is not set.

        Returns:
            Akismet spam classifier
        """
        return RealAkismetSpamClassifier(
            api_key=settings.spam.akismet_api_key,
            blog_url=settings.forum.root_url,
            timeout=settings.spam.akismet_timeout,
        )
