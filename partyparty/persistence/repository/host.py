"""Record store implementation of Host repository."""

from typing import Optional

from partyparty.domain.model import Host
from partyparty.domain.repository import HostRepository
from partyparty.domain.value import Collection, UserId
from partyparty.persistence.mappers import host_to_record, record_to_host
from partyparty.persistence.repository.base import RecordStoreRepository


class RecordStoreHostRepository(RecordStoreRepository, HostRepository):
    """Host repository over the ``host`` collection."""

    collection = Collection.HOST

    async def find_by_user_id(
        self, credential: str, user_id: UserId
    ) -> Optional[Host]:
        records = await self._find(credential, {"user_id": user_id})
        if not records:
            return None
        return self._to_entity(record_to_host, records[0], "find")

    async def find_by_email(self, credential: str, email: str) -> Optional[Host]:
        # Exact match; no case or whitespace normalisation
        records = await self._find(credential, {"email": email})
        if not records:
            return None
        return self._to_entity(record_to_host, records[0], "find")

    async def create(
        self, credential: str, user_id: UserId, email: str, name: str
    ) -> Host:
        record = await self._create(
            credential, {"user_id": user_id, "email": email, "name": name}
        )
        return self._to_entity(record_to_host, record, "create")

    async def update(self, credential: str, host: Host) -> Host:
        record = await self._update(credential, host.id, host_to_record(host))
        return self._to_entity(record_to_host, record, "update")
