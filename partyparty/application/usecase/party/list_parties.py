"""List parties use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from partyparty.domain.model import Party, UserIdentity
from partyparty.domain.service import PartyService


class PartyItem(BaseModel):
    """Party in responses."""

    party_id: str
    title: str
    details: str
    scheduled_for: datetime
    user_id: str

    @classmethod
    def from_party(cls, party: Party) -> "PartyItem":
        return cls(
            party_id=party.id,
            title=party.title,
            details=party.details,
            scheduled_for=party.scheduled_for,
            user_id=party.user_id,
        )


class ListPartiesRequest(BaseModel):
    """List parties request."""

    identity: UserIdentity


class ListPartiesResponse(BaseModel):
    """List parties response."""

    parties: list[PartyItem]


class ListPartiesUseCase:
    """Use case for listing parties, soonest first."""

    def __init__(self, party_service: PartyService) -> None:
        self.party_service = party_service

    async def execute(self, request: ListPartiesRequest) -> ListPartiesResponse:
        with logfire.span("list_parties", user_id=request.identity.user_id):
            parties = await self.party_service.list_parties(request.identity)
            parties.sort(key=lambda p: p.scheduled_for)
            return ListPartiesResponse(parties=[PartyItem.from_party(p) for p in parties])
