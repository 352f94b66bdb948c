"""Guest routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from partyparty.application.usecase.guest import (
    CreateGuestRequest,
    CreateGuestResponse,
    CreateGuestUseCase,
    ListGuestsRequest,
    ListGuestsResponse,
    ListGuestsUseCase,
    UpdateGuestRequest,
    UpdateGuestResponse,
    UpdateGuestUseCase,
)
from partyparty.domain.service import AuthService
from partyparty.interface.api.auth import authenticate

router = APIRouter(prefix="/guests", tags=["guests"], route_class=DishkaRoute)


class GuestAPIRequest(BaseModel):
    """API request body for creating or updating a guest."""

    name: str
    email: str
    phone: str


@router.get("", response_model=ListGuestsResponse)
async def list_guests(
    list_guests_use_case: FromDishka[ListGuestsUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> ListGuestsResponse:
    """List guests."""
    identity = await authenticate(auth_service, authorization)
    return await list_guests_use_case.execute(ListGuestsRequest(identity=identity))


@router.post("", response_model=CreateGuestResponse, status_code=status.HTTP_201_CREATED)
async def create_guest(
    request: GuestAPIRequest,
    create_guest_use_case: FromDishka[CreateGuestUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> CreateGuestResponse:
    """Create a guest."""
    identity = await authenticate(auth_service, authorization)
    return await create_guest_use_case.execute(
        CreateGuestRequest(
            identity=identity,
            name=request.name,
            email=request.email,
            phone=request.phone,
        )
    )


@router.put("/{guest_id}", response_model=UpdateGuestResponse)
async def update_guest(
    guest_id: str,
    request: GuestAPIRequest,
    update_guest_use_case: FromDishka[UpdateGuestUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> UpdateGuestResponse:
    """Update a guest's contact details."""
    identity = await authenticate(auth_service, authorization)
    return await update_guest_use_case.execute(
        UpdateGuestRequest(
            identity=identity,
            guest_id=guest_id,
            name=request.name,
            email=request.email,
            phone=request.phone,
        )
    )
