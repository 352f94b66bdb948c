"""Host entity.

The profile of a user who organises parties.
"""

from partyparty.domain.model.common import DomainModel
from partyparty.domain.value import HostId, UserId


class Host(DomainModel):
    """Host profile linked to a user identity.

    A host can exist before its owner has an account (for example an invited
    host), in which case it is claimed by email on sign-up.
    """

    id: HostId
    user_id: UserId
    email: str
    name: str
