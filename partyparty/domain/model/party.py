"""Party entity."""

from datetime import datetime

from partyparty.domain.model.common import DomainModel
from partyparty.domain.value import PartyId, UserId


class Party(DomainModel):
    """An event organised by a host."""

    id: PartyId
    title: str
    details: str
    scheduled_for: datetime
    user_id: UserId
