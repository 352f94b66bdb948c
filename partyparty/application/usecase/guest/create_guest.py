"""Create guest use case."""

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.application.usecase.guest.list_guests import GuestItem
from partyparty.domain.model import UserIdentity
from partyparty.domain.service import GuestService


class CreateGuestRequest(BaseModel):
    """Request to add a guest to the address book."""

    identity: UserIdentity
    name: str
    email: str
    phone: str


class CreateGuestResponse(BaseModel):
    """Created guest."""

    guest: GuestItem


class CreateGuestUseCase(BaseUseCase[CreateGuestRequest, CreateGuestResponse]):
    """Use case for creating a guest."""

    def __init__(self, guest_service: GuestService) -> None:
        """Initialize use case.

        Args:
            guest_service: Guest domain service
        """
        self.guest_service = guest_service

    async def execute(self, request: CreateGuestRequest) -> CreateGuestResponse:
        """Create the guest.

        Raises:
            ValidationError: If a contact field is missing or malformed
            SyncFailure: If the record store fails
        """
        with logfire.span("create_guest", user_id=request.identity.user_id):
            guest = await self.guest_service.create_guest(
                request.identity, request.name, request.email, request.phone
            )
            return CreateGuestResponse(guest=GuestItem.from_guest(guest))
