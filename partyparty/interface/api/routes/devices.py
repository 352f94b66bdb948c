"""Push device routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from partyparty.application.usecase.device import (
    SignOutRequest,
    SignOutResponse,
    SignOutUseCase,
    SyncDeviceRequest,
    SyncDeviceResponse,
    SyncDeviceUseCase,
)
from partyparty.domain.service import AuthService
from partyparty.domain.value import DevicePlatform
from partyparty.interface.api.auth import authenticate

router = APIRouter(prefix="/devices", tags=["devices"], route_class=DishkaRoute)


class SyncDeviceAPIRequest(BaseModel):
    """API request for registering a push device."""

    push_token: str
    platform: DevicePlatform


@router.put("", response_model=SyncDeviceResponse)
async def sync_device(
    request: SyncDeviceAPIRequest,
    sync_device_use_case: FromDishka[SyncDeviceUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> SyncDeviceResponse:
    """Bind this installation's push token to the signed-in user.

    Called after every sign-in; repeated calls write nothing.
    """
    identity = await authenticate(auth_service, authorization)
    return await sync_device_use_case.execute(
        SyncDeviceRequest(
            identity=identity,
            push_token=request.push_token,
            platform=request.platform,
        )
    )


@router.delete("/{push_token}", response_model=SignOutResponse)
async def sign_out_device(
    push_token: str,
    sign_out_use_case: FromDishka[SignOutUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> SignOutResponse:
    """Remove the push device of a signing-out user."""
    identity = await authenticate(auth_service, authorization)
    return await sign_out_use_case.execute(
        SignOutRequest(identity=identity, push_token=push_token)
    )
