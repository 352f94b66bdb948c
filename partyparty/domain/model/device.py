"""Device entity.

A push-notification registration for one app installation.
"""

from datetime import datetime, timezone

from pydantic import Field

from partyparty.domain.model.common import DomainModel
from partyparty.domain.value import DeviceId, DevicePlatform, PushToken, UserId


class Device(DomainModel):
    """Push-notification device bound to a user.

    Business rules:
    - At most one device record per push token
    - After binding, the owner is the currently signed-in user
    - Deleted on sign-out, otherwise only ever updated
    """

    id: DeviceId
    user_id: UserId
    token: PushToken
    # Known tags parse to DevicePlatform; anything else stays a plain string
    platform: DevicePlatform | str = Field(union_mode="left_to_right")
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
