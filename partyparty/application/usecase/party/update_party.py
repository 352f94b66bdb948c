"""Update party use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.application.usecase.party.create_party import MembershipItem
from partyparty.application.usecase.party.list_parties import PartyItem
from partyparty.domain.model import UserIdentity
from partyparty.domain.service import MembershipService, PartyService
from partyparty.domain.value import GuestId, PartyId, validate_record_id


class UpdatePartyRequest(BaseModel):
    """Request to edit a party and converge its guest list."""

    identity: UserIdentity
    party_id: str
    title: str
    details: str
    scheduled_for: datetime
    guest_ids: list[str] = []


class UpdatePartyResponse(BaseModel):
    """Updated party and its invitation result."""

    party: PartyItem
    membership: MembershipItem


class UpdatePartyUseCase(BaseUseCase[UpdatePartyRequest, UpdatePartyResponse]):
    """Use case for editing a party and reconciling its invitations."""

    def __init__(
        self, party_service: PartyService, membership_service: MembershipService
    ) -> None:
        """Initialize use case.

        Args:
            party_service: Party domain service
            membership_service: Membership reconciliation domain service
        """
        self.party_service = party_service
        self.membership_service = membership_service

    async def execute(self, request: UpdatePartyRequest) -> UpdatePartyResponse:
        """Update the party details, then reconcile the guest selection.

        The current invitation set is re-read after the update so that the
        delta is computed against the latest remote state.

        Raises:
            NotFoundError: If the party does not exist
            ValidationError: If party fields or ids are invalid
            SyncFailure: If the party update or the invite read fails
            PartialReconciliationError: If some invitation writes failed
        """
        party_id = PartyId(validate_record_id(request.party_id, "party"))
        guest_ids = [GuestId(validate_record_id(g, "guest")) for g in request.guest_ids]
        self.party_service.validate_details(
            request.title, request.details, request.scheduled_for
        )

        with logfire.span(
            "update_party", party_id=party_id, guest_count=len(guest_ids)
        ):
            party = await self.party_service.get_party(request.identity, party_id)
            updated = await self.party_service.update_party(
                request.identity,
                party,
                request.title,
                request.details,
                request.scheduled_for,
            )

            invites = await self.party_service.get_invites(request.identity, party_id)
            outcome = await self.membership_service.reconcile(
                request.identity, party_id, invites, guest_ids
            )
            outcome.raise_for_failures()

            return UpdatePartyResponse(
                party=PartyItem.from_party(updated),
                membership=MembershipItem.from_outcome(outcome),
            )
