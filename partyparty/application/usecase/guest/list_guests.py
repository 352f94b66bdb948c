"""List guests use case."""

import logfire
from pydantic import BaseModel

from partyparty.domain.model import Guest, UserIdentity
from partyparty.domain.service import GuestService


class GuestItem(BaseModel):
    """Guest in responses."""

    guest_id: str
    name: str
    email: str
    phone: str

    @classmethod
    def from_guest(cls, guest: Guest) -> "GuestItem":
        return cls(
            guest_id=guest.id, name=guest.name, email=guest.email, phone=guest.phone.root
        )


class ListGuestsRequest(BaseModel):
    """List guests request."""

    identity: UserIdentity


class ListGuestsResponse(BaseModel):
    """List guests response."""

    guests: list[GuestItem]


class ListGuestsUseCase:
    """Use case for listing guests."""

    def __init__(self, guest_service: GuestService) -> None:
        self.guest_service = guest_service

    async def execute(self, request: ListGuestsRequest) -> ListGuestsResponse:
        with logfire.span("list_guests", user_id=request.identity.user_id):
            guests = await self.guest_service.list_guests(request.identity)
            return ListGuestsResponse(guests=[GuestItem.from_guest(g) for g in guests])
