"""Invite entity.

Join record between a party and a guest, carrying the guest's RSVP.
"""

from typing import Any

from pydantic import field_validator

from partyparty.domain.model.common import DomainModel
from partyparty.domain.value import GuestId, InviteId, PartyId, RsvpState


class Invite(DomainModel):
    """Invitation of one guest to one party.

    Business rules:
    - Unique per (party_id, guest_id)
    - RSVP state defaults to pending when absent or unrecognised
    - Removed by hard delete, never soft-deleted
    """

    id: InviteId
    party_id: PartyId
    guest_id: GuestId
    state: RsvpState = RsvpState.PENDING

    @field_validator("state", mode="before")
    @classmethod
    def default_missing_state(cls, v: Any) -> RsvpState:
        """Treat an absent or unknown state as pending."""
        if isinstance(v, RsvpState):
            return v
        try:
            return RsvpState(v)
        except ValueError:
            return RsvpState.PENDING
