"""Base service class for domain services."""

from partyparty.domain.error import NotAuthenticatedError
from partyparty.domain.model.user_identity import UserIdentity


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def _credential_for(identity: UserIdentity | None) -> str:
        """Return the bearer credential of an authenticated identity.

        Raises:
            NotAuthenticatedError: If there is no identity or no credential
        """
        if identity is None or not identity.is_authenticated:
            raise NotAuthenticatedError()
        assert identity.credential is not None
        return identity.credential.get_secret_value()
