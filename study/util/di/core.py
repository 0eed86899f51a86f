"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from study.config import AuthSettings, QASettings, Settings
from study.util.di.base import ProviderBase
from study.util.error import ConfigurationError

DEFAULT_JWT_SECRET = AuthSettings().jwt_secret


def validate_settings(settings: Settings) -> Settings:
    """Refuse to run production with development defaults.

    Raises:
        ConfigurationError: If production still uses the default JWT secret
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
    return settings


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return validate_settings(Settings())

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_qa_settings(self, settings: Settings) -> QASettings:
        """Provide Q&A engine settings."""
        return settings.qa
