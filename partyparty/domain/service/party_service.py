"""Party domain service."""

from datetime import datetime, timezone
from typing import Callable

import logfire

from partyparty.domain.error import NotFoundError, ValidationError
from partyparty.domain.model.invite import Invite
from partyparty.domain.model.party import Party
from partyparty.domain.model.user_identity import UserIdentity
from partyparty.domain.repository import InviteRepository, PartyRepository
from partyparty.domain.value import PartyId, validate_record_id

from .base import Service


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_invitation_message(party: Party, app_link_text: str) -> str:
    """Build the default invitation text sent to a party's guests.

    Args:
        party: Party being announced
        app_link_text: Closing line pointing guests at the app

    Returns:
        Message body
    """
    when = party.scheduled_for
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    when_text = when.astimezone(timezone.utc).strftime("%A, %B %d, %Y at %H:%M UTC")
    return (
        f"You're invited to {party.title}!\n\n"
        f"{party.details}\n"
        f"When: {when_text}\n\n"
        f"{app_link_text}"
    )


class PartyService(Service):
    """Domain service for party operations."""

    def __init__(
        self,
        party_repository: PartyRepository,
        invite_repository: InviteRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize party service.

        Args:
            party_repository: Party repository
            invite_repository: Invite repository
            clock: Source of "now" for schedule validation
        """
        self.party_repository = party_repository
        self.invite_repository = invite_repository
        self.clock = clock

    def validate_details(self, title: str, details: str, scheduled_for: datetime) -> None:
        """Check party fields before they are written.

        Raises:
            ValidationError: If title or details are blank, or the party is
                not scheduled strictly in the future
        """
        if not title or not title.strip() or not details or not details.strip():
            raise ValidationError("Title and Details are required.")

        when = scheduled_for
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        if when <= self.clock():
            raise ValidationError("Scheduled date must be in the future.")

    async def list_parties(self, identity: UserIdentity) -> list[Party]:
        """List the parties visible to the user."""
        credential = self._credential_for(identity)
        with logfire.span("party_service.list_parties", user_id=identity.user_id):
            parties = await self.party_repository.list_all(credential)
            logfire.info("Parties listed", count=len(parties))
            return parties

    async def get_party(self, identity: UserIdentity, party_id: PartyId) -> Party:
        """Get a party by id.

        Raises:
            NotFoundError: If the party does not exist
        """
        credential = self._credential_for(identity)
        validate_record_id(party_id, "party")
        party = await self.party_repository.find_by_id(credential, party_id)
        if party is None:
            raise NotFoundError("Party", party_id)
        return party

    async def get_invites(self, identity: UserIdentity, party_id: PartyId) -> list[Invite]:
        """Read the current invitation set of a party."""
        credential = self._credential_for(identity)
        validate_record_id(party_id, "party")
        with logfire.span("party_service.get_invites", party_id=party_id):
            invites = await self.invite_repository.find_by_party(credential, party_id)
            logfire.info("Party invites read", party_id=party_id, count=len(invites))
            return invites

    async def create_party(
        self,
        identity: UserIdentity,
        title: str,
        details: str,
        scheduled_for: datetime,
    ) -> Party:
        """Create a party owned by the user.

        Raises:
            ValidationError: If the party fields are invalid
            SyncFailure: If the store write fails
        """
        credential = self._credential_for(identity)
        self.validate_details(title, details, scheduled_for)

        with logfire.span("party_service.create_party", user_id=identity.user_id):
            party = await self.party_repository.create(
                credential,
                title=title,
                details=details,
                scheduled_for=scheduled_for,
                user_id=identity.user_id,
            )
            logfire.info("Party created", party_id=party.id, user_id=identity.user_id)
            return party

    async def update_party(
        self,
        identity: UserIdentity,
        party: Party,
        title: str,
        details: str,
        scheduled_for: datetime,
    ) -> Party:
        """Update a party's details; the editing user becomes its owner.

        Raises:
            ValidationError: If the party fields are invalid
            SyncFailure: If the store write fails
        """
        credential = self._credential_for(identity)
        self.validate_details(title, details, scheduled_for)

        with logfire.span("party_service.update_party", party_id=party.id):
            updated = party.model_copy(
                update={
                    "title": title,
                    "details": details,
                    "scheduled_for": scheduled_for,
                    "user_id": identity.user_id,
                }
            )
            saved = await self.party_repository.update(credential, updated)
            logfire.info("Party updated", party_id=saved.id)
            return saved
