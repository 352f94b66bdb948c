"""Advance RSVP use case."""

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.domain.model import UserIdentity
from partyparty.domain.service import RsvpService
from partyparty.domain.value import InviteId, RsvpState


class AdvanceRsvpRequest(BaseModel):
    """Request to move a guest's RSVP to its next state."""

    identity: UserIdentity
    invite_id: str


class AdvanceRsvpResponse(BaseModel):
    """Two-phase RSVP result.

    ``local_state`` is what the caller should display immediately;
    ``confirmed_state`` is what the store holds, None if the write failed.
    """

    invite_id: str
    guest_id: str
    previous_state: RsvpState
    local_state: RsvpState
    confirmed_state: RsvpState | None = None
    confirmed: bool
    error: str | None = None


class AdvanceRsvpUseCase(BaseUseCase[AdvanceRsvpRequest, AdvanceRsvpResponse]):
    """Use case for cycling an invitation's RSVP state."""

    def __init__(self, rsvp_service: RsvpService) -> None:
        """Initialize use case.

        Args:
            rsvp_service: RSVP domain service
        """
        self.rsvp_service = rsvp_service

    async def execute(self, request: AdvanceRsvpRequest) -> AdvanceRsvpResponse:
        """Advance the RSVP; a failed write is reported, not raised.

        Raises:
            NotFoundError: If the invite does not exist
            SyncFailure: If the invite cannot be read
        """
        with logfire.span("advance_rsvp", invite_id=request.invite_id):
            invite = await self.rsvp_service.get_invite(
                request.identity, InviteId(request.invite_id)
            )
            change = await self.rsvp_service.advance_rsvp(request.identity, invite)

            return AdvanceRsvpResponse(
                invite_id=change.local.id,
                guest_id=change.local.guest_id,
                previous_state=change.previous,
                local_state=change.local.state,
                confirmed_state=change.confirmed.state if change.confirmed else None,
                confirmed=change.is_confirmed,
                error=change.error,
            )
