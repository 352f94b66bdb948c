"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from partyparty.adapter.firebase import FirebaseIdentityClient
from partyparty.config import Settings
from partyparty.domain.service import IdentityProviderClient
from partyparty.util.di.base import ProviderBase
from partyparty.util.error import ConfigurationError


class IdentityProvider(ProviderBase):
    """Identity provider component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider backed by Firebase Auth."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: Settings) -> IdentityProviderClient:
        """Provide Firebase identity client.

        Raises:
            ConfigurationError: If no API key is configured outside the emulator
        """
        identity = settings.identity
        if not identity.use_emulator and identity.api_key == "CHANGE_ME_IN_PRODUCTION":
            if settings.environment in ("staging", "production"):
                raise ConfigurationError("IDENTITY__API_KEY", settings.environment)

        return FirebaseIdentityClient(
            api_key=identity.api_key,
            endpoint=identity.endpoint,
            timeout_seconds=identity.timeout_seconds,
        )
