"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from citadel.config import BoardSettings, IdentitySettings, Settings
from citadel.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_identity_settings(self, settings: Settings) -> IdentitySettings:
        """Provide identity settings."""
        return settings.identity

    @provide(scope=Scope.APP)
    def provide_board_settings(self, settings: Settings) -> BoardSettings:
        """Provide board settings."""
        return settings.boards
