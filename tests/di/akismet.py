"""Mock Akismet providers for testing."""

from dishka import Scope, provide

from agora.adapter.akismet import MockAkismetSpamClassifier
from agora.domain.service.spam_service import SpamClassifier
from agora.util.di.infrastructure.akismet import AkismetProvider


class MockAkismetProvider(AkismetProvider):
    """Mock Akismet provider flagging content with the test spam marker."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_spam_classifier(self) -> SpamClassifier:
        """Provide mock spam classifier."""
        return MockAkismetSpamClassifier()
