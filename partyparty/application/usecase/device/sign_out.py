"""Sign out use case."""

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.domain.model import UserIdentity
from partyparty.domain.service import DeviceBindingService
from partyparty.domain.value import PushToken


class SignOutRequest(BaseModel):
    """Request to unregister this installation on sign-out."""

    identity: UserIdentity
    push_token: PushToken


class SignOutResponse(BaseModel):
    """Sign-out result."""

    device_removed: bool


class SignOutUseCase(BaseUseCase[SignOutRequest, SignOutResponse]):
    """Use case for removing the push device of a signing-out user."""

    def __init__(self, device_binding_service: DeviceBindingService) -> None:
        self.device_binding_service = device_binding_service

    async def execute(self, request: SignOutRequest) -> SignOutResponse:
        with logfire.span("sign_out", user_id=request.identity.user_id):
            removed = await self.device_binding_service.unbind_device(
                request.identity, request.push_token
            )
            return SignOutResponse(device_removed=removed)
