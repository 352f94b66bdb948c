"""RSVP state machine and its persistence."""

from collections.abc import Iterable
from types import MappingProxyType
from typing import Mapping

import logfire

from partyparty.domain.error import NotFoundError, SyncFailure
from partyparty.domain.model.invite import Invite
from partyparty.domain.model.rsvp import RsvpChange, RsvpDrift
from partyparty.domain.model.user_identity import UserIdentity
from partyparty.domain.repository import InviteRepository
from partyparty.domain.value import InviteId, PartyId, RsvpState, validate_record_id

from .base import Service

# Each advance moves one step around the cycle; there is no terminal state
RSVP_TRANSITIONS: Mapping[RsvpState, RsvpState] = MappingProxyType(
    {
        RsvpState.PENDING: RsvpState.ACCEPTED,
        RsvpState.ACCEPTED: RsvpState.DECLINED,
        RsvpState.DECLINED: RsvpState.MAYBE,
        RsvpState.MAYBE: RsvpState.PENDING,
    }
)


def next_rsvp_state(state: RsvpState | str | None) -> RsvpState:
    """Return the state following ``state``; absent or unknown counts as pending."""
    try:
        current = RsvpState(state) if state is not None else RsvpState.PENDING
    except ValueError:
        current = RsvpState.PENDING
    return RSVP_TRANSITIONS[current]


def advance(invite: Invite) -> Invite:
    """Return a copy of the invite moved to its next RSVP state."""
    return invite.model_copy(update={"state": next_rsvp_state(invite.state)})


class RsvpService(Service):
    """Applies RSVP transitions optimistically and persists them."""

    def __init__(self, invite_repository: InviteRepository) -> None:
        """Initialize RSVP service.

        Args:
            invite_repository: Invite repository
        """
        self.invite_repository = invite_repository

    async def get_invite(self, identity: UserIdentity, invite_id: InviteId) -> Invite:
        """Get an invitation by id.

        Raises:
            NotFoundError: If the invite does not exist
        """
        credential = self._credential_for(identity)
        validate_record_id(invite_id, "invite")
        invite = await self.invite_repository.find_by_id(credential, invite_id)
        if invite is None:
            raise NotFoundError("Invite", invite_id)
        return invite

    async def advance_rsvp(self, identity: UserIdentity, invite: Invite) -> RsvpChange:
        """Advance an invitation and persist the new state.

        The local transition is computed first and returned regardless of
        the outcome of persistence. A persistence failure is logged and
        reported on the change; the local state is not reverted.

        Args:
            identity: Signed-in user
            invite: Invitation as currently held by the caller

        Returns:
            Change carrying the local and the confirmed invite

        Raises:
            NotAuthenticatedError: If identity has no credential
            ValidationError: If the invite id is malformed
        """
        credential = self._credential_for(identity)
        validate_record_id(invite.id, "invite")

        local = advance(invite)

        with logfire.span(
            "rsvp_service.advance_rsvp",
            invite_id=invite.id,
            previous=invite.state.value,
            next=local.state.value,
        ):
            try:
                confirmed = await self.invite_repository.update(credential, local)
            except SyncFailure as e:
                logfire.error(
                    "RSVP update not persisted",
                    invite_id=invite.id,
                    local_state=local.state.value,
                    error=str(e),
                )
                return RsvpChange(previous=invite.state, local=local, error=str(e))

            if confirmed.state != local.state:
                logfire.warn(
                    "RSVP stored state differs from local state",
                    invite_id=invite.id,
                    local_state=local.state.value,
                    stored_state=confirmed.state.value,
                )
            return RsvpChange(previous=invite.state, local=local, confirmed=confirmed)

    async def detect_drift(
        self,
        identity: UserIdentity,
        party_id: PartyId,
        local_invites: Iterable[Invite],
    ) -> list[RsvpDrift]:
        """Compare locally held RSVP states with the remote invitation set.

        Args:
            identity: Signed-in user
            party_id: Party whose invitations are compared
            local_invites: Invites as held by the caller

        Returns:
            One drift entry per local invite whose remote state differs or
            which no longer exists remotely

        Raises:
            NotAuthenticatedError: If identity has no credential
            SyncFailure: If the remote invites cannot be read
        """
        credential = self._credential_for(identity)
        validate_record_id(party_id, "party")

        with logfire.span("rsvp_service.detect_drift", party_id=party_id):
            remote = {
                invite.id: invite
                for invite in await self.invite_repository.find_by_party(
                    credential, party_id
                )
            }

            drift = []
            for local in local_invites:
                remote_invite = remote.get(local.id)
                remote_state = remote_invite.state if remote_invite else None
                if remote_state != local.state:
                    drift.append(
                        RsvpDrift(
                            invite_id=local.id,
                            guest_id=local.guest_id,
                            local_state=local.state,
                            remote_state=remote_state,
                        )
                    )

            if drift:
                logfire.warn("RSVP drift detected", party_id=party_id, count=len(drift))
            return drift
