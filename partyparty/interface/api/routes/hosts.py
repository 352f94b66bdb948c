"""Host profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from partyparty.application.usecase.host import (
    SignUpRequest,
    SignUpResponse,
    SignUpUseCase,
    SyncHostRequest,
    SyncHostResponse,
    SyncHostUseCase,
)
from partyparty.domain.service import AuthService
from partyparty.interface.api.auth import authenticate

router = APIRouter(prefix="/hosts", tags=["hosts"], route_class=DishkaRoute)


class SignUpAPIRequest(BaseModel):
    """API request for sign-up."""

    name: str


@router.put("/me", response_model=SyncHostResponse)
async def sync_host(
    sync_host_use_case: FromDishka[SyncHostUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> SyncHostResponse:
    """Link the host profile to the signed-in user (sign-in refresh)."""
    identity = await authenticate(auth_service, authorization)
    return await sync_host_use_case.execute(SyncHostRequest(identity=identity))


@router.post(
    "/signup", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED
)
async def sign_up(
    request: SignUpAPIRequest,
    sign_up_use_case: FromDishka[SignUpUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> SignUpResponse:
    """Create or claim the host profile of a new account.

    If the profile cannot be stored the new account is deleted again.
    """
    identity = await authenticate(auth_service, authorization)
    return await sign_up_use_case.execute(
        SignUpRequest(identity=identity, name=request.name)
    )
