"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from agora.config import (
    AuthSettings,
    ForumSettings,
    PointsSettings,
    Settings,
    SpamSettings,
)
from agora.util.di.base import ProviderBase
from agora.util.error import ConfigurationError
from agora.util.lang import Lang

DEFAULT_JWT_SECRET = AuthSettings.model_fields["jwt_secret"].default


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        settings = Settings()
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_forum_settings(self, settings: Settings) -> ForumSettings:
        return settings.forum

    @provide(scope=Scope.APP)
    def provide_points_settings(self, settings: Settings) -> PointsSettings:
        return settings.points

    @provide(scope=Scope.APP)
    def provide_spam_settings(self, settings: Settings) -> SpamSettings:
        return settings.spam

    @provide(scope=Scope.APP)
    def provide_lang(self, forum_settings: ForumSettings) -> Lang:
        """Provide the message catalog for the configured language."""
        return Lang(forum_settings)
