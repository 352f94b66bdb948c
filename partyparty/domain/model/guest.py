"""Guest entity."""

from partyparty.domain.model.common import DomainModel
from partyparty.domain.value import GuestId, PhoneNumber


class Guest(DomainModel):
    """A person a host can invite to parties."""

    id: GuestId
    name: str
    email: str
    phone: PhoneNumber
