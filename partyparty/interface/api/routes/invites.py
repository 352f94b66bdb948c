"""Invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from partyparty.application.usecase.invite import (
    AdvanceRsvpRequest,
    AdvanceRsvpResponse,
    AdvanceRsvpUseCase,
)
from partyparty.domain.service import AuthService
from partyparty.interface.api.auth import authenticate

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.post("/{invite_id}/advance", response_model=AdvanceRsvpResponse)
async def advance_rsvp(
    invite_id: str,
    advance_rsvp_use_case: FromDishka[AdvanceRsvpUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> AdvanceRsvpResponse:
    """Move the invitation to its next RSVP state.

    The response always carries the new local state; ``confirmed`` is false
    and ``error`` is set when the store did not accept the change.
    """
    identity = await authenticate(auth_service, authorization)
    return await advance_rsvp_use_case.execute(
        AdvanceRsvpRequest(identity=identity, invite_id=invite_id)
    )
