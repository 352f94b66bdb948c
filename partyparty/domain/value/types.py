"""Domain value objects for PartyParty.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from partyparty.domain.value.common import RootValueObject


class RsvpState(str, Enum):
    """Response state of an invitation.

    Serialized as the lowercase token in record payloads.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    MAYBE = "maybe"


class DevicePlatform(str, Enum):
    """Platform tag recorded on a push-notification device.

    Stored records may carry tags outside this set (older app builds); those
    are read back as plain strings, see ``platform_tag``.
    """

    IOS = "ios"
    ANDROID = "android"
    WEB = "web"
    WINDOWS = "windows"
    MACOS = "macos"


def platform_tag(platform: DevicePlatform | str) -> str:
    """Return the wire token of a platform, known or not."""
    if isinstance(platform, DevicePlatform):
        return platform.value
    return platform


class MembershipOperation(str, Enum):
    """Kind of write issued while reconciling party membership."""

    ADD = "add"
    REMOVE = "remove"


class Collection(str, Enum):
    """Collections exposed by the remote record store."""

    DEVICE = "user_device"
    HOST = "host"
    GUEST = "guest"
    PARTY = "party"
    INVITE = "invite"


class PushToken(RootValueObject[str]):
    """Push-notification token issued to an app installation.

    Compared by exact value; one device record exists per token.
    """

    @field_validator("root")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Validate token is not blank."""
        if not v or not v.strip():
            raise ValueError("Push token must not be empty")
        if len(v) > 4096:
            raise ValueError("Push token must be at most 4096 characters")
        return v


class PhoneNumber(RootValueObject[str]):
    """Guest phone number used as an SMS recipient.

    Digits with optional leading '+', spaces and dashes, at least 7 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        """Validate phone number format."""
        if not re.match(r"^\+?[\d\s-]{7,}$", v):
            raise ValueError("Please enter a valid phone number")
        return v
