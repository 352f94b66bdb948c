"""Update guest use case."""

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.application.usecase.guest.list_guests import GuestItem
from partyparty.domain.model import UserIdentity
from partyparty.domain.service import GuestService
from partyparty.domain.value import GuestId


class UpdateGuestRequest(BaseModel):
    """Request to change a guest's contact details."""

    identity: UserIdentity
    guest_id: str
    name: str
    email: str
    phone: str


class UpdateGuestResponse(BaseModel):
    """Updated guest."""

    guest: GuestItem


class UpdateGuestUseCase(BaseUseCase[UpdateGuestRequest, UpdateGuestResponse]):
    """Use case for updating a guest."""

    def __init__(self, guest_service: GuestService) -> None:
        """Initialize use case.

        Args:
            guest_service: Guest domain service
        """
        self.guest_service = guest_service

    async def execute(self, request: UpdateGuestRequest) -> UpdateGuestResponse:
        """Update the guest.

        Raises:
            NotFoundError: If the guest does not exist
            ValidationError: If a contact field is missing or malformed
            SyncFailure: If the record store fails
        """
        with logfire.span("update_guest", guest_id=request.guest_id):
            # Validate before the lookup so bad input never reaches the store
            GuestService.validate_contact(request.name, request.email, request.phone)

            guest = await self.guest_service.get_guest(
                request.identity, GuestId(request.guest_id)
            )
            updated = await self.guest_service.update_guest(
                request.identity, guest, request.name, request.email, request.phone
            )
            return UpdateGuestResponse(guest=GuestItem.from_guest(updated))
