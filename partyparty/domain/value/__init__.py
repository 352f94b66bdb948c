"""Domain value objects for PartyParty."""

from partyparty.domain.value.identifiers import (
    DeviceId,
    GuestId,
    HostId,
    InviteId,
    PartyId,
    UserId,
    validate_record_id,
)
from partyparty.domain.value.types import (
    Collection,
    DevicePlatform,
    MembershipOperation,
    PhoneNumber,
    PushToken,
    RsvpState,
    platform_tag,
)

__all__ = [
    # Identifiers
    "UserId",
    "DeviceId",
    "HostId",
    "PartyId",
    "GuestId",
    "InviteId",
    "validate_record_id",
    # Types
    "Collection",
    "DevicePlatform",
    "MembershipOperation",
    "PhoneNumber",
    "PushToken",
    "RsvpState",
    "platform_tag",
]
