"""Membership reconciliation results.

A delta describes how to move a party's invitation set to a desired guest
selection; an outcome reports what happened when the delta was applied.
"""

from typing import Optional

from pydantic import Field

from partyparty.domain.error import PartialReconciliationError
from partyparty.domain.model.common import DomainModel
from partyparty.domain.model.invite import Invite
from partyparty.domain.value import GuestId, InviteId, MembershipOperation, PartyId


class MembershipDelta(DomainModel):
    """Additions and removals needed to reach a desired guest selection.

    ``to_add`` holds guest ids with no invite yet; ``to_remove`` holds the
    invites whose guest is no longer selected. The two never share a guest.
    """

    to_add: frozenset[GuestId] = frozenset()
    to_remove: tuple[Invite, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove

    @property
    def operation_count(self) -> int:
        return len(self.to_add) + len(self.to_remove)


class MembershipOperationResult(DomainModel):
    """Result of one create or delete issued by the reconciler."""

    operation: MembershipOperation
    guest_id: GuestId
    invite_id: Optional[InviteId] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class ReconciliationOutcome(DomainModel):
    """Combined result of a reconciliation batch."""

    party_id: PartyId
    results: tuple[MembershipOperationResult, ...] = Field(default_factory=tuple)

    @property
    def succeeded(self) -> list[MembershipOperationResult]:
        return [r for r in self.results if r.succeeded]

    @property
    def failed(self) -> list[MembershipOperationResult]:
        return [r for r in self.results if not r.succeeded]

    @property
    def is_complete(self) -> bool:
        """True when every issued operation succeeded (or none were needed)."""
        return not self.failed

    @property
    def failed_additions(self) -> set[GuestId]:
        return {
            r.guest_id for r in self.failed if r.operation == MembershipOperation.ADD
        }

    @property
    def failed_removals(self) -> set[GuestId]:
        return {
            r.guest_id
            for r in self.failed
            if r.operation == MembershipOperation.REMOVE
        }

    def raise_for_failures(self) -> "ReconciliationOutcome":
        """Raise if any operation failed, otherwise return self.

        Raises:
            PartialReconciliationError: If the batch did not fully converge
        """
        if not self.is_complete:
            raise PartialReconciliationError(self)
        return self
