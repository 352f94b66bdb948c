"""Party membership reconciliation domain service."""

import asyncio
from collections.abc import Iterable

import logfire

from partyparty.domain.error import SyncFailure, ValidationError
from partyparty.domain.model.invite import Invite
from partyparty.domain.model.membership import (
    MembershipDelta,
    MembershipOperationResult,
    ReconciliationOutcome,
)
from partyparty.domain.model.user_identity import UserIdentity
from partyparty.domain.repository import InviteRepository
from partyparty.domain.value import (
    GuestId,
    MembershipOperation,
    PartyId,
    RsvpState,
    validate_record_id,
)

from .base import Service


def compute_delta(
    original_invites: Iterable[Invite], desired_guest_ids: Iterable[GuestId]
) -> MembershipDelta:
    """Compute the invites to create and delete for a guest selection.

    to_add is every desired guest without an invite; to_remove is every
    invite whose guest is not desired. A guest can never be in both.

    Args:
        original_invites: Invitation set currently held for the party
        desired_guest_ids: Guest selection the user intends

    Returns:
        The membership delta
    """
    invites = tuple(original_invites)
    desired = frozenset(desired_guest_ids)
    invited = {invite.guest_id for invite in invites}

    return MembershipDelta(
        to_add=desired - invited,
        to_remove=tuple(inv for inv in invites if inv.guest_id not in desired),
    )


class MembershipService(Service):
    """Converges a party's invitation set to a guest selection."""

    def __init__(self, invite_repository: InviteRepository) -> None:
        """Initialize membership service.

        Args:
            invite_repository: Invite repository
        """
        self.invite_repository = invite_repository

    async def reconcile(
        self,
        identity: UserIdentity,
        party_id: PartyId,
        original_invites: Iterable[Invite],
        desired_guest_ids: Iterable[GuestId],
    ) -> ReconciliationOutcome:
        """Apply the membership delta as one batch of independent writes.

        Creates and deletes are dispatched concurrently and all are awaited
        before returning. Failed operations are reported in the outcome and
        successful ones are kept; calling again recomputes the remaining
        delta against the new remote state. The batch is shielded so a
        cancelled caller does not abort writes already issued.

        Args:
            identity: Signed-in user
            party_id: Party being edited
            original_invites: Invitation set the caller last read for the party
            desired_guest_ids: Guest selection to converge to (may be empty)

        Returns:
            Outcome listing every operation issued and whether it succeeded

        Raises:
            NotAuthenticatedError: If identity has no credential
            ValidationError: If an id is malformed or an invite belongs to
                another party
        """
        credential = self._credential_for(identity)

        validate_record_id(party_id, "party")
        invites = tuple(original_invites)
        desired = frozenset(desired_guest_ids)
        for guest_id in desired:
            validate_record_id(guest_id, "guest")
        for invite in invites:
            if invite.party_id != party_id:
                raise ValidationError(
                    f"Invite {invite.id} belongs to party {invite.party_id}, "
                    f"not {party_id}"
                )

        delta = compute_delta(invites, desired)

        with logfire.span(
            "membership_service.reconcile",
            party_id=party_id,
            to_add=len(delta.to_add),
            to_remove=len(delta.to_remove),
        ):
            if delta.is_empty:
                logfire.info("Membership already converged", party_id=party_id)
                return ReconciliationOutcome(party_id=party_id)

            operations = [
                self._add(credential, party_id, guest_id)
                for guest_id in sorted(delta.to_add)
            ] + [self._remove(credential, invite) for invite in delta.to_remove]

            results = await asyncio.shield(asyncio.gather(*operations))
            outcome = ReconciliationOutcome(party_id=party_id, results=tuple(results))

            if outcome.is_complete:
                logfire.info(
                    "Membership reconciled",
                    party_id=party_id,
                    operations=len(results),
                )
            else:
                logfire.warn(
                    "Membership partially reconciled",
                    party_id=party_id,
                    failed_additions=sorted(outcome.failed_additions),
                    failed_removals=sorted(outcome.failed_removals),
                )
            return outcome

    async def _add(
        self, credential: str, party_id: PartyId, guest_id: GuestId
    ) -> MembershipOperationResult:
        try:
            invite = await self.invite_repository.create(
                credential, party_id=party_id, guest_id=guest_id, state=RsvpState.PENDING
            )
        except SyncFailure as e:
            return MembershipOperationResult(
                operation=MembershipOperation.ADD, guest_id=guest_id, error=str(e)
            )
        return MembershipOperationResult(
            operation=MembershipOperation.ADD, guest_id=guest_id, invite_id=invite.id
        )

    async def _remove(
        self, credential: str, invite: Invite
    ) -> MembershipOperationResult:
        try:
            await self.invite_repository.delete(credential, invite.id)
        except SyncFailure as e:
            return MembershipOperationResult(
                operation=MembershipOperation.REMOVE,
                guest_id=invite.guest_id,
                invite_id=invite.id,
                error=str(e),
            )
        return MembershipOperationResult(
            operation=MembershipOperation.REMOVE,
            guest_id=invite.guest_id,
            invite_id=invite.id,
        )
