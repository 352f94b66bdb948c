"""Get party invitations use case."""

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.party.list_parties import PartyItem
from partyparty.config import Settings
from partyparty.domain.model import UserIdentity
from partyparty.domain.service import (
    GuestService,
    PartyService,
    format_invitation_message,
)
from partyparty.domain.value import PartyId, RsvpState


class InvitationItem(BaseModel):
    """Invited guest with their RSVP state."""

    invite_id: str
    guest_id: str
    name: str
    email: str
    phone: str
    state: RsvpState


class GetPartyInvitationsRequest(BaseModel):
    """Get party invitations request."""

    identity: UserIdentity
    party_id: str


class GetPartyInvitationsResponse(BaseModel):
    """Invitations of a party, with the message to send and its recipients."""

    party: PartyItem
    invitations: list[InvitationItem]
    message: str
    recipients: list[str]


class GetPartyInvitationsUseCase:
    """Use case for showing who is invited to a party and how they replied."""

    def __init__(
        self,
        party_service: PartyService,
        guest_service: GuestService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            party_service: Party domain service
            guest_service: Guest domain service
            settings: Application settings
        """
        self.party_service = party_service
        self.guest_service = guest_service
        self.settings = settings

    async def execute(
        self, request: GetPartyInvitationsRequest
    ) -> GetPartyInvitationsResponse:
        """Join the party's invites with their guests.

        Invites pointing at a guest that no longer exists are skipped.

        Raises:
            NotFoundError: If the party does not exist
            SyncFailure: If the record store fails
        """
        party_id = PartyId(request.party_id)

        with logfire.span("get_party_invitations", party_id=party_id):
            party = await self.party_service.get_party(request.identity, party_id)
            invites = await self.party_service.get_invites(request.identity, party_id)
            guests = {
                g.id: g for g in await self.guest_service.list_guests(request.identity)
            }

            invitations = []
            for invite in invites:
                guest = guests.get(invite.guest_id)
                if guest is None:
                    logfire.warn(
                        "Invite references unknown guest",
                        invite_id=invite.id,
                        guest_id=invite.guest_id,
                    )
                    continue
                invitations.append(
                    InvitationItem(
                        invite_id=invite.id,
                        guest_id=guest.id,
                        name=guest.name,
                        email=guest.email,
                        phone=guest.phone.root,
                        state=invite.state,
                    )
                )

            return GetPartyInvitationsResponse(
                party=PartyItem.from_party(party),
                invitations=invitations,
                message=format_invitation_message(
                    party, self.settings.invitations.app_link_text
                ),
                recipients=[i.phone for i in invitations],
            )
