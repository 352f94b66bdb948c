"""Mappers for converting between record store records and domain models.

Records are plain JSON objects. Datetimes travel as ISO-8601 strings and
enums as their lowercase token.
"""

from typing import Any, Dict

from partyparty.domain.model import Device, Guest, Host, Invite, Party
from partyparty.domain.value import (
    DeviceId,
    GuestId,
    HostId,
    InviteId,
    PartyId,
    PhoneNumber,
    PushToken,
    UserId,
    platform_tag,
)


def record_to_device(record: Dict[str, Any]) -> Device:
    """Convert a user_device record to a Device domain model.

    Args:
        record: Record as returned by the store

    Returns:
        Device domain model
    """
    fields: Dict[str, Any] = {}
    if record.get("updated_at"):
        fields["updated_at"] = record["updated_at"]

    return Device(
        id=DeviceId(record["id"]),
        user_id=UserId(record["user_id"]),
        token=PushToken(record["token"]),
        platform=record["platform"],
        **fields,
    )


def device_to_record(device: Device) -> Dict[str, Any]:
    """Convert a Device domain model to record fields (without id)."""
    return {
        "user_id": device.user_id,
        "token": device.token.root,
        "platform": platform_tag(device.platform),
        "updated_at": device.updated_at.isoformat(),
    }


def record_to_host(record: Dict[str, Any]) -> Host:
    """Convert a host record to a Host domain model."""
    return Host(
        id=HostId(record["id"]),
        user_id=UserId(record.get("user_id") or ""),
        email=record["email"],
        name=record.get("name") or "",
    )


def host_to_record(host: Host) -> Dict[str, Any]:
    """Convert a Host domain model to record fields (without id)."""
    return {"user_id": host.user_id, "email": host.email, "name": host.name}


def record_to_guest(record: Dict[str, Any]) -> Guest:
    """Convert a guest record to a Guest domain model."""
    return Guest(
        id=GuestId(record["id"]),
        name=record["name"],
        email=record["email"],
        phone=PhoneNumber(record["phone"]),
    )


def guest_to_record(guest: Guest) -> Dict[str, Any]:
    """Convert a Guest domain model to record fields (without id)."""
    return {"name": guest.name, "email": guest.email, "phone": guest.phone.root}


def record_to_party(record: Dict[str, Any]) -> Party:
    """Convert a party record to a Party domain model."""
    return Party(
        id=PartyId(record["id"]),
        title=record["title"],
        details=record["details"],
        scheduled_for=record["scheduled_for"],
        user_id=UserId(record["user_id"]),
    )


def party_to_record(party: Party) -> Dict[str, Any]:
    """Convert a Party domain model to record fields (without id)."""
    return {
        "title": party.title,
        "details": party.details,
        "scheduled_for": party.scheduled_for.isoformat(),
        "user_id": party.user_id,
    }


def record_to_invite(record: Dict[str, Any]) -> Invite:
    """Convert an invite record to an Invite domain model.

    A missing or unrecognised state reads as pending.
    """
    return Invite(
        id=InviteId(record["id"]),
        party_id=PartyId(record["party_id"]),
        guest_id=GuestId(record["guest_id"]),
        state=record.get("state"),
    )


def invite_to_record(invite: Invite) -> Dict[str, Any]:
    """Convert an Invite domain model to record fields (without id)."""
    return {
        "party_id": invite.party_id,
        "guest_id": invite.guest_id,
        "state": invite.state.value,
    }
