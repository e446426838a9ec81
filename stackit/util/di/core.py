"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from stackit.config import (
    AuthSettings,
    IdentityProviderSettings,
    NotificationSettings,
    RateLimitSettings,
    Settings,
)
from stackit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_identity_provider_settings(
        self, settings: Settings
    ) -> IdentityProviderSettings:
        return settings.auth.identity_provider

    @provide
    def provide_notification_settings(self, settings: Settings) -> NotificationSettings:
        return settings.notifications

    @provide
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        return settings.rate_limits
