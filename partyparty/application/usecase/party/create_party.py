"""Create party use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.application.usecase.party.list_parties import PartyItem
from partyparty.domain.model import ReconciliationOutcome, UserIdentity
from partyparty.domain.service import MembershipService, PartyService
from partyparty.domain.value import GuestId, MembershipOperation, validate_record_id


class MembershipItem(BaseModel):
    """Summary of a membership reconciliation."""

    party_id: str
    added: list[str]
    removed: list[str]
    failed_additions: list[str]
    failed_removals: list[str]
    complete: bool

    @classmethod
    def from_outcome(cls, outcome: ReconciliationOutcome) -> "MembershipItem":
        added = [
            r.guest_id
            for r in outcome.succeeded
            if r.operation == MembershipOperation.ADD
        ]
        removed = [
            r.guest_id
            for r in outcome.succeeded
            if r.operation == MembershipOperation.REMOVE
        ]
        return cls(
            party_id=outcome.party_id,
            added=sorted(added),
            removed=sorted(removed),
            failed_additions=sorted(outcome.failed_additions),
            failed_removals=sorted(outcome.failed_removals),
            complete=outcome.is_complete,
        )


class CreatePartyRequest(BaseModel):
    """Request to create a party and invite an initial guest selection."""

    identity: UserIdentity
    title: str
    details: str
    scheduled_for: datetime
    guest_ids: list[str] = []


class CreatePartyResponse(BaseModel):
    """Created party and its invitation result."""

    party: PartyItem
    membership: MembershipItem


class CreatePartyUseCase(BaseUseCase[CreatePartyRequest, CreatePartyResponse]):
    """Use case for creating a party with its guest list."""

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

    async def execute(self, request: CreatePartyRequest) -> CreatePartyResponse:
        """Create the party, then invite the selected guests.

        Raises:
            ValidationError: If party fields or guest ids are invalid
            SyncFailure: If the party could not be created
            PartialReconciliationError: If some invitations failed; the party
                and the successful invitations are kept
        """
        guest_ids = [GuestId(validate_record_id(g, "guest")) for g in request.guest_ids]

        with logfire.span(
            "create_party",
            user_id=request.identity.user_id,
            guest_count=len(guest_ids),
        ):
            party = await self.party_service.create_party(
                request.identity, request.title, request.details, request.scheduled_for
            )

            # A new party has no invitations yet
            outcome = await self.membership_service.reconcile(
                request.identity, party.id, [], guest_ids
            )
            outcome.raise_for_failures()

            return CreatePartyResponse(
                party=PartyItem.from_party(party),
                membership=MembershipItem.from_outcome(outcome),
            )
