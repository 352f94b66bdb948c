"""Strongly typed identifiers for PartyParty entities.

Record ids are assigned by the remote record store and are opaque strings.
User ids come from the identity provider and are opaque as well.
"""

import re
from typing import NewType

from partyparty.domain.error import ValidationError

UserId = NewType("UserId", str)
DeviceId = NewType("DeviceId", str)
HostId = NewType("HostId", str)
PartyId = NewType("PartyId", str)
GuestId = NewType("GuestId", str)
InviteId = NewType("InviteId", str)

MAX_ID_LENGTH = 255

# Ids are used as URL path segments by the record store
_MALFORMED_ID = re.compile(r"[\s/]")


def validate_record_id(value: str, kind: str) -> str:
    """Check that an opaque id is well formed.

    Args:
        value: Candidate id
        kind: Entity name used in the error message

    Returns:
        The id unchanged

    Raises:
        ValidationError: If the id is empty, too long, or contains
            whitespace or a slash
    """
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{kind} id must be a non-empty string")
    if len(value) > MAX_ID_LENGTH:
        raise ValidationError(f"{kind} id must be at most {MAX_ID_LENGTH} characters")
    if _MALFORMED_ID.search(value):
        raise ValidationError(f"Malformed {kind} id: {value!r}")
    return value
