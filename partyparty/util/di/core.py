"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from partyparty.config import InvitationSettings, RecordStoreSettings, Settings
from partyparty.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_record_store_settings(self, settings: Settings) -> RecordStoreSettings:
        """Provide record store settings."""
        return settings.record_store

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations
