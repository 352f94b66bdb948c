"""Party routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from partyparty.application.usecase.invite import (
    DetectRsvpDriftRequest,
    DetectRsvpDriftResponse,
    DetectRsvpDriftUseCase,
    LocalRsvp,
)
from partyparty.application.usecase.party import (
    CreatePartyRequest,
    CreatePartyResponse,
    CreatePartyUseCase,
    GetPartyInvitationsRequest,
    GetPartyInvitationsResponse,
    GetPartyInvitationsUseCase,
    ListPartiesRequest,
    ListPartiesResponse,
    ListPartiesUseCase,
    UpdatePartyRequest,
    UpdatePartyResponse,
    UpdatePartyUseCase,
)
from partyparty.domain.service import AuthService
from partyparty.interface.api.auth import authenticate

router = APIRouter(prefix="/parties", tags=["parties"], route_class=DishkaRoute)


class PartyAPIRequest(BaseModel):
    """API request body for creating or editing a party.

    ``guest_ids`` is the full desired guest selection.
    """

    title: str
    details: str
    scheduled_for: datetime
    guest_ids: list[str] = []


class DriftAPIRequest(BaseModel):
    """RSVP states currently displayed by the client."""

    local: list[LocalRsvp]


@router.get("", response_model=ListPartiesResponse)
async def list_parties(
    list_parties_use_case: FromDishka[ListPartiesUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> ListPartiesResponse:
    """List parties."""
    identity = await authenticate(auth_service, authorization)
    return await list_parties_use_case.execute(ListPartiesRequest(identity=identity))


@router.post("", response_model=CreatePartyResponse, status_code=status.HTTP_201_CREATED)
async def create_party(
    request: PartyAPIRequest,
    create_party_use_case: FromDishka[CreatePartyUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> CreatePartyResponse:
    """Create a party and invite the selected guests.

    Responds 207 with the membership summary when some invitations failed.
    """
    identity = await authenticate(auth_service, authorization)
    return await create_party_use_case.execute(
        CreatePartyRequest(
            identity=identity,
            title=request.title,
            details=request.details,
            scheduled_for=request.scheduled_for,
            guest_ids=request.guest_ids,
        )
    )


@router.put("/{party_id}", response_model=UpdatePartyResponse)
async def update_party(
    party_id: str,
    request: PartyAPIRequest,
    update_party_use_case: FromDishka[UpdatePartyUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> UpdatePartyResponse:
    """Edit a party and converge its invitations to the selected guests.

    Responds 207 with the membership summary when some writes failed;
    repeating the request applies only what is still missing.
    """
    identity = await authenticate(auth_service, authorization)
    return await update_party_use_case.execute(
        UpdatePartyRequest(
            identity=identity,
            party_id=party_id,
            title=request.title,
            details=request.details,
            scheduled_for=request.scheduled_for,
            guest_ids=request.guest_ids,
        )
    )


@router.get("/{party_id}/invitations", response_model=GetPartyInvitationsResponse)
async def get_party_invitations(
    party_id: str,
    get_party_invitations_use_case: FromDishka[GetPartyInvitationsUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> GetPartyInvitationsResponse:
    """Invited guests with their RSVP state and the invitation message."""
    identity = await authenticate(auth_service, authorization)
    return await get_party_invitations_use_case.execute(
        GetPartyInvitationsRequest(identity=identity, party_id=party_id)
    )


@router.post("/{party_id}/invitations/drift", response_model=DetectRsvpDriftResponse)
async def detect_rsvp_drift(
    party_id: str,
    request: DriftAPIRequest,
    detect_rsvp_drift_use_case: FromDishka[DetectRsvpDriftUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> DetectRsvpDriftResponse:
    """Report displayed RSVP states that differ from the stored ones."""
    identity = await authenticate(auth_service, authorization)
    return await detect_rsvp_drift_use_case.execute(
        DetectRsvpDriftRequest(identity=identity, party_id=party_id, local=request.local)
    )
