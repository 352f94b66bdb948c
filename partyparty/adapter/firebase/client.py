"""Firebase Auth identity provider clients.

Bearer credentials are Firebase ID tokens. They are verified through the
Identity Toolkit REST API, which the Auth emulator also serves.
"""

import httpx
import logfire
from pydantic import SecretStr

from partyparty.adapter.error import IdentityProviderError
from partyparty.domain.error import NotAuthenticatedError
from partyparty.domain.model.user_identity import UserIdentity
from partyparty.domain.service.auth_service import IdentityProviderClient
from partyparty.domain.value import UserId


class FirebaseIdentityClient(IdentityProviderClient):
    """Identity provider client for Firebase Auth."""

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Firebase identity client.

        Args:
            api_key: Firebase web API key
            endpoint: Identity Toolkit v1 endpoint (production or emulator)
            timeout_seconds: Per-request timeout
            transport: Optional httpx transport (used in tests)
        """
        self.api_key = api_key
        self.endpoint = endpoint.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def _call(self, method: str, id_token: str) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport
            ) as client:
                return await client.post(
                    f"{self.endpoint}/accounts:{method}",
                    params={"key": self.api_key},
                    json={"idToken": id_token},
                )
        except httpx.HTTPError as e:
            logfire.error("Identity provider HTTP error", method=method, error=str(e))
            raise IdentityProviderError(f"HTTP error during accounts:{method}: {e}")

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return response.text

    async def resolve(self, credential: str) -> UserIdentity:
        """Verify a Firebase ID token and return the user's identity.

        Args:
            credential: Firebase ID token

        Returns:
            Identity carrying the token as its credential

        Raises:
            NotAuthenticatedError: If the token is invalid, expired or revoked
            IdentityProviderError: If the provider cannot be reached
        """
        response = await self._call("lookup", credential)

        # Identity Toolkit answers bad tokens with 400 INVALID_ID_TOKEN et al.
        if response.status_code == 400:
            reason = self._error_message(response)
            logfire.warn("ID token rejected", reason=reason)
            raise NotAuthenticatedError(f"Invalid credential: {reason}")

        if response.status_code != 200:
            logfire.error(
                "Identity lookup failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise IdentityProviderError(f"Lookup failed: {response.status_code}")

        users = response.json().get("users") or []
        if not users:
            raise NotAuthenticatedError("Credential does not belong to a user")

        user = users[0]
        return UserIdentity(
            user_id=UserId(user["localId"]),
            email=user.get("email"),
            display_name=user.get("displayName"),
            credential=SecretStr(credential),
        )

    async def delete_account(self, identity: UserIdentity) -> None:
        """Delete the Firebase account behind an identity.

        Raises:
            IdentityProviderError: If the account could not be deleted
        """
        if identity.credential is None:
            raise NotAuthenticatedError()

        response = await self._call("delete", identity.credential.get_secret_value())
        if response.status_code != 200:
            logfire.error(
                "Account deletion failed",
                user_id=identity.user_id,
                status_code=response.status_code,
                error=self._error_message(response),
            )
            raise IdentityProviderError(
                f"Account deletion failed: {response.status_code}"
            )


class MockIdentityProviderClient(IdentityProviderClient):
    """Mock identity provider for testing.

    Accepts credentials of the form ``mock:<user_id>:<email>``; an empty
    email part yields an identity without email.
    """

    PREFIX = "mock"

    def __init__(self) -> None:
        self.deleted_accounts: list[UserId] = []

    @classmethod
    def credential_for(cls, user_id: str, email: str | None = None) -> str:
        """Build a credential this mock will resolve."""
        return f"{cls.PREFIX}:{user_id}:{email or ''}"

    async def resolve(self, credential: str) -> UserIdentity:
        parts = credential.split(":", 2)
        if len(parts) != 3 or parts[0] != self.PREFIX or not parts[1]:
            raise NotAuthenticatedError("Invalid credential")

        _, user_id, email = parts
        if user_id in self.deleted_accounts:
            raise NotAuthenticatedError("Account deleted")

        return UserIdentity(
            user_id=UserId(user_id),
            email=email or None,
            credential=SecretStr(credential),
        )

    async def delete_account(self, identity: UserIdentity) -> None:
        self.deleted_accounts.append(identity.user_id)
