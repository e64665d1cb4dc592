"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from stackit.config import AuthSettings, ConsistencySettings, Settings
from stackit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

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
    def provide_consistency_settings(self, settings: Settings) -> ConsistencySettings:
        """Provide optimistic concurrency settings."""
        return settings.consistency
