"""Bearer credential handling for API routes."""

from partyparty.domain.model import UserIdentity
from partyparty.domain.service import AuthService
from partyparty.interface.error import InvalidAuthorizationHeaderError


def parse_bearer(authorization: str | None) -> str:
    """Extract the credential from an ``Authorization: Bearer`` header.

    Raises:
        InvalidAuthorizationHeaderError: If the header is missing or malformed
    """
    if not authorization:
        raise InvalidAuthorizationHeaderError("Not authenticated")

    scheme, _, credential = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credential.strip():
        raise InvalidAuthorizationHeaderError("Expected a bearer credential")
    return credential.strip()


async def authenticate(auth_service: AuthService, authorization: str | None) -> UserIdentity:
    """Resolve the signed-in user from the request's Authorization header.

    Raises:
        InvalidAuthorizationHeaderError: If the header is missing or malformed
        NotAuthenticatedError: If the identity provider rejects the credential
    """
    return await auth_service.authenticate(parse_bearer(authorization))
