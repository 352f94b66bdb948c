"""Record store implementation of Device repository."""

from datetime import datetime
from typing import Optional

from partyparty.domain.model import Device
from partyparty.domain.repository import DeviceRepository
from partyparty.domain.value import (
    Collection,
    DeviceId,
    DevicePlatform,
    PushToken,
    UserId,
)
from partyparty.persistence.mappers import device_to_record, record_to_device
from partyparty.persistence.repository.base import RecordStoreRepository


class RecordStoreDeviceRepository(RecordStoreRepository, DeviceRepository):
    """Device repository over the ``user_device`` collection."""

    collection = Collection.DEVICE

    async def find_by_token(
        self, credential: str, token: PushToken
    ) -> Optional[Device]:
        records = await self._find(credential, {"token": token.root})
        if not records:
            return None
        return self._to_entity(record_to_device, records[0], "find")

    async def create(
        self,
        credential: str,
        user_id: UserId,
        token: PushToken,
        platform: DevicePlatform,
        updated_at: datetime,
    ) -> Device:
        record = await self._create(
            credential,
            {
                "user_id": user_id,
                "token": token.root,
                "platform": platform.value,
                "updated_at": updated_at.isoformat(),
            },
        )
        return self._to_entity(record_to_device, record, "create")

    async def update(self, credential: str, device: Device) -> Device:
        record = await self._update(credential, device.id, device_to_record(device))
        return self._to_entity(record_to_device, record, "update")

    async def delete(self, credential: str, device_id: DeviceId) -> None:
        await self._delete(credential, device_id)
