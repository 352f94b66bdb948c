"""Domain model entities for PartyParty."""

from partyparty.domain.model.device import Device
from partyparty.domain.model.guest import Guest
from partyparty.domain.model.host import Host
from partyparty.domain.model.invite import Invite
from partyparty.domain.model.membership import (
    MembershipDelta,
    MembershipOperationResult,
    ReconciliationOutcome,
)
from partyparty.domain.model.party import Party
from partyparty.domain.model.rsvp import RsvpChange, RsvpDrift
from partyparty.domain.model.user_identity import UserIdentity

__all__ = [
    "Device",
    "Guest",
    "Host",
    "Invite",
    "MembershipDelta",
    "MembershipOperationResult",
    "Party",
    "ReconciliationOutcome",
    "RsvpChange",
    "RsvpDrift",
    "UserIdentity",
]
