"""User identity value.

The signed-in user as asserted by the external identity provider.
"""

from typing import Optional

from pydantic import SecretStr

from partyparty.domain.model.common import DomainModel
from partyparty.domain.value import UserId


class UserIdentity(DomainModel):
    """Externally authenticated user, immutable for the session.

    Passed explicitly into every binding and reconciliation call; the
    credential is forwarded as the bearer token on record store requests.
    """

    user_id: UserId
    email: Optional[str] = None
    display_name: Optional[str] = None
    credential: Optional[SecretStr] = None

    @property
    def is_authenticated(self) -> bool:
        """Whether a usable bearer credential is present."""
        return bool(self.user_id) and bool(
            self.credential and self.credential.get_secret_value()
        )
