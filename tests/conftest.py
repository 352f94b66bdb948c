"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone

from pydantic import SecretStr

from partyparty.adapter.firebase import MockIdentityProviderClient
from partyparty.domain.model import UserIdentity
from partyparty.domain.value import UserId


def make_identity(
    user_id: str = "user-alice", email: str | None = "alice@example.com"
) -> UserIdentity:
    """Build a signed-in identity the mock identity provider also accepts.

    Args:
        user_id: Identity provider user id
        email: Account email, None for accounts without one

    Returns:
        Authenticated UserIdentity
    """
    return UserIdentity(
        user_id=UserId(user_id),
        email=email,
        credential=SecretStr(MockIdentityProviderClient.credential_for(user_id, email)),
    )


def future(days: int = 7) -> datetime:
    """A UTC datetime the given number of days from now."""
    return datetime.now(timezone.utc) + timedelta(days=days)
