"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quill.config import AuthSettings, Settings
from quill.util.di.base import ProviderBase
from quill.util.retry import RetryPolicy


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_retry_policy(self, settings: Settings) -> RetryPolicy:
        """Provide the transient-failure retry policy."""
        return RetryPolicy.from_settings(settings.database)
