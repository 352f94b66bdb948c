"""Record store implementation of Guest repository."""

from typing import Optional

from partyparty.domain.model import Guest
from partyparty.domain.repository import GuestRepository
from partyparty.domain.value import Collection, GuestId, PhoneNumber
from partyparty.persistence.mappers import guest_to_record, record_to_guest
from partyparty.persistence.repository.base import RecordStoreRepository


class RecordStoreGuestRepository(RecordStoreRepository, GuestRepository):
    """Guest repository over the ``guest`` collection."""

    collection = Collection.GUEST

    async def list_all(self, credential: str) -> list[Guest]:
        records = await self._find(credential)
        return [self._to_entity(record_to_guest, r, "find") for r in records]

    async def find_by_id(self, credential: str, guest_id: GuestId) -> Optional[Guest]:
        record = await self._get(credential, guest_id)
        return self._to_entity(record_to_guest, record, "get") if record else None

    async def create(
        self, credential: str, name: str, email: str, phone: PhoneNumber
    ) -> Guest:
        record = await self._create(
            credential, {"name": name, "email": email, "phone": phone.root}
        )
        return self._to_entity(record_to_guest, record, "create")

    async def update(self, credential: str, guest: Guest) -> Guest:
        record = await self._update(credential, guest.id, guest_to_record(guest))
        return self._to_entity(record_to_guest, record, "update")
