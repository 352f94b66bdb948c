"""Detect RSVP drift use case."""

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.domain.model import Invite, UserIdentity
from partyparty.domain.service import RsvpService
from partyparty.domain.value import GuestId, InviteId, PartyId, RsvpState


class LocalRsvp(BaseModel):
    """RSVP state as currently displayed by the caller."""

    invite_id: str
    guest_id: str
    state: RsvpState


class DriftItem(BaseModel):
    """An invite whose displayed state differs from the stored one."""

    invite_id: str
    guest_id: str
    local_state: RsvpState
    remote_state: RsvpState | None
    missing: bool


class DetectRsvpDriftRequest(BaseModel):
    """Request to compare displayed RSVP states with the store."""

    identity: UserIdentity
    party_id: str
    local: list[LocalRsvp]


class DetectRsvpDriftResponse(BaseModel):
    """Drift report; empty when everything displayed is confirmed."""

    party_id: str
    drift: list[DriftItem]


class DetectRsvpDriftUseCase(
    BaseUseCase[DetectRsvpDriftRequest, DetectRsvpDriftResponse]
):
    """Use case for surfacing RSVP changes that never reached the store."""

    def __init__(self, rsvp_service: RsvpService) -> None:
        self.rsvp_service = rsvp_service

    async def execute(self, request: DetectRsvpDriftRequest) -> DetectRsvpDriftResponse:
        party_id = PartyId(request.party_id)
        local_invites = [
            Invite(
                id=InviteId(item.invite_id),
                party_id=party_id,
                guest_id=GuestId(item.guest_id),
                state=item.state,
            )
            for item in request.local
        ]

        with logfire.span("detect_rsvp_drift", party_id=party_id):
            drift = await self.rsvp_service.detect_drift(
                request.identity, party_id, local_invites
            )
            return DetectRsvpDriftResponse(
                party_id=party_id,
                drift=[
                    DriftItem(
                        invite_id=d.invite_id,
                        guest_id=d.guest_id,
                        local_state=d.local_state,
                        remote_state=d.remote_state,
                        missing=d.remote_state is None,
                    )
                    for d in drift
                ],
            )
