"""Record store implementation of Invite repository."""

from typing import Optional

from partyparty.domain.model import Invite
from partyparty.domain.repository import InviteRepository
from partyparty.domain.value import Collection, GuestId, InviteId, PartyId, RsvpState
from partyparty.persistence.mappers import invite_to_record, record_to_invite
from partyparty.persistence.repository.base import RecordStoreRepository


class RecordStoreInviteRepository(RecordStoreRepository, InviteRepository):
    """Invite repository over the ``invite`` collection."""

    collection = Collection.INVITE

    async def find_by_id(
        self, credential: str, invite_id: InviteId
    ) -> Optional[Invite]:
        record = await self._get(credential, invite_id)
        return self._to_entity(record_to_invite, record, "get") if record else None

    async def find_by_party(self, credential: str, party_id: PartyId) -> list[Invite]:
        records = await self._find(credential, {"party_id": party_id})
        return [self._to_entity(record_to_invite, r, "find") for r in records]

    async def create(
        self,
        credential: str,
        party_id: PartyId,
        guest_id: GuestId,
        state: RsvpState = RsvpState.PENDING,
    ) -> Invite:
        record = await self._create(
            credential,
            {"party_id": party_id, "guest_id": guest_id, "state": state.value},
        )
        return self._to_entity(record_to_invite, record, "create")

    async def update(self, credential: str, invite: Invite) -> Invite:
        record = await self._update(credential, invite.id, invite_to_record(invite))
        return self._to_entity(record_to_invite, record, "update")

    async def delete(self, credential: str, invite_id: InviteId) -> None:
        await self._delete(credential, invite_id)
