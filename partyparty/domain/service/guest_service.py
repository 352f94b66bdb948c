"""Guest domain service."""

import logfire
from pydantic import ValidationError as PydanticValidationError

from partyparty.domain.error import NotFoundError, ValidationError
from partyparty.domain.model.guest import Guest
from partyparty.domain.model.user_identity import UserIdentity
from partyparty.domain.repository import GuestRepository
from partyparty.domain.value import GuestId, PhoneNumber, validate_record_id

from .base import Service


class GuestService(Service):
    """Domain service for guest operations."""

    def __init__(self, guest_repository: GuestRepository) -> None:
        """Initialize guest service.

        Args:
            guest_repository: Guest repository
        """
        self.guest_repository = guest_repository

    @staticmethod
    def validate_contact(name: str, email: str, phone: str) -> PhoneNumber:
        """Check guest contact fields.

        Returns:
            The validated phone number

        Raises:
            ValidationError: If a field is missing or malformed
        """
        if not name or not email or not phone:
            raise ValidationError("All fields are required.")
        if "@" not in email:
            raise ValidationError("Please enter a valid email address.")
        try:
            return PhoneNumber(phone)
        except PydanticValidationError:
            raise ValidationError("Please enter a valid phone number.")

    async def list_guests(self, identity: UserIdentity) -> list[Guest]:
        """List the guests visible to the user."""
        credential = self._credential_for(identity)
        with logfire.span("guest_service.list_guests", user_id=identity.user_id):
            guests = await self.guest_repository.list_all(credential)
            logfire.info("Guests listed", count=len(guests))
            return guests

    async def get_guest(self, identity: UserIdentity, guest_id: GuestId) -> Guest:
        """Get a guest by id.

        Raises:
            NotFoundError: If the guest does not exist
        """
        credential = self._credential_for(identity)
        validate_record_id(guest_id, "guest")
        guest = await self.guest_repository.find_by_id(credential, guest_id)
        if guest is None:
            raise NotFoundError("Guest", guest_id)
        return guest

    async def create_guest(
        self, identity: UserIdentity, name: str, email: str, phone: str
    ) -> Guest:
        """Create a guest."""
        credential = self._credential_for(identity)
        phone_number = self.validate_contact(name, email, phone)

        with logfire.span("guest_service.create_guest", user_id=identity.user_id):
            guest = await self.guest_repository.create(
                credential, name=name, email=email, phone=phone_number
            )
            logfire.info("Guest created", guest_id=guest.id)
            return guest

    async def update_guest(
        self, identity: UserIdentity, guest: Guest, name: str, email: str, phone: str
    ) -> Guest:
        """Update a guest's contact details."""
        credential = self._credential_for(identity)
        phone_number = self.validate_contact(name, email, phone)

        with logfire.span("guest_service.update_guest", guest_id=guest.id):
            updated = guest.model_copy(
                update={"name": name, "email": email, "phone": phone_number}
            )
            saved = await self.guest_repository.update(credential, updated)
            logfire.info("Guest updated", guest_id=saved.id)
            return saved
