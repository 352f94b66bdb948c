"""Authentication domain service."""

import logfire

from partyparty.domain.error import NotAuthenticatedError
from partyparty.domain.model.user_identity import UserIdentity

from .base import Service


class IdentityProviderClient:
    """Interface to the external identity provider."""

    async def resolve(self, credential: str) -> UserIdentity:
        """Verify a bearer credential and return its identity.

        Args:
            credential: Bearer credential presented by the client

        Returns:
            Identity carrying the same credential

        Raises:
            NotAuthenticatedError: If the credential is invalid or expired
        """
        raise NotImplementedError

    async def delete_account(self, identity: UserIdentity) -> None:
        """Delete the account behind an identity.

        Args:
            identity: Identity whose account is removed
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for resolving and rolling back user identities."""

    def __init__(self, identity_client: IdentityProviderClient) -> None:
        """Initialize auth service.

        Args:
            identity_client: Identity provider client
        """
        self.identity_client = identity_client

    async def authenticate(self, credential: str | None) -> UserIdentity:
        """Resolve the identity behind a bearer credential.

        Args:
            credential: Bearer credential, may be missing

        Returns:
            Authenticated identity

        Raises:
            NotAuthenticatedError: If the credential is missing or invalid
        """
        if not credential:
            raise NotAuthenticatedError("Missing bearer credential")

        identity = await self.identity_client.resolve(credential)
        logfire.info("Identity resolved", user_id=identity.user_id)
        return identity

    async def delete_account(self, identity: UserIdentity) -> None:
        """Delete the account behind an identity (sign-up rollback).

        Args:
            identity: Identity of the account to delete

        Raises:
            NotAuthenticatedError: If identity has no credential
        """
        self._credential_for(identity)
        with logfire.span("auth_service.delete_account", user_id=identity.user_id):
            await self.identity_client.delete_account(identity)
            logfire.warn("Account deleted", user_id=identity.user_id)
