"""Device repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from partyparty.domain.model.device import Device
from partyparty.domain.value import DeviceId, DevicePlatform, PushToken, UserId


class DeviceRepository(ABC):
    """Repository for Device entity.

    Every call carries the bearer credential of the signed-in user.
    Implementations raise SyncFailure when the store operation fails.
    """

    @abstractmethod
    async def find_by_token(self, credential: str, token: PushToken) -> Device | None:
        """Find a device by exact push token.

        Args:
            credential: Bearer credential
            token: Push token to match

        Returns:
            The first matching device, None if there is none
        """
        pass

    @abstractmethod
    async def create(
        self,
        credential: str,
        user_id: UserId,
        token: PushToken,
        platform: DevicePlatform,
        updated_at: datetime,
    ) -> Device:
        """Create a device record.

        Returns:
            The created device with its store-assigned id
        """
        pass

    @abstractmethod
    async def update(self, credential: str, device: Device) -> Device:
        """Replace a device record.

        Returns:
            The device as stored
        """
        pass

    @abstractmethod
    async def delete(self, credential: str, device_id: DeviceId) -> None:
        """Delete a device record."""
        pass
