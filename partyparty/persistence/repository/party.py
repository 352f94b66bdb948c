"""Record store implementation of Party repository."""

from datetime import datetime
from typing import Optional

from partyparty.domain.model import Party
from partyparty.domain.repository import PartyRepository
from partyparty.domain.value import Collection, PartyId, UserId
from partyparty.persistence.mappers import party_to_record, record_to_party
from partyparty.persistence.repository.base import RecordStoreRepository


class RecordStorePartyRepository(RecordStoreRepository, PartyRepository):
    """Party repository over the ``party`` collection."""

    collection = Collection.PARTY

    async def list_all(self, credential: str) -> list[Party]:
        records = await self._find(credential)
        return [self._to_entity(record_to_party, r, "find") for r in records]

    async def find_by_id(self, credential: str, party_id: PartyId) -> Optional[Party]:
        record = await self._get(credential, party_id)
        return self._to_entity(record_to_party, record, "get") if record else None

    async def create(
        self,
        credential: str,
        title: str,
        details: str,
        scheduled_for: datetime,
        user_id: UserId,
    ) -> Party:
        record = await self._create(
            credential,
            {
                "title": title,
                "details": details,
                "scheduled_for": scheduled_for.isoformat(),
                "user_id": user_id,
            },
        )
        return self._to_entity(record_to_party, record, "create")

    async def update(self, credential: str, party: Party) -> Party:
        record = await self._update(credential, party.id, party_to_record(party))
        return self._to_entity(record_to_party, record, "update")
