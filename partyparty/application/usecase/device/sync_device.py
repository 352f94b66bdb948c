"""Sync device use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.domain.model import UserIdentity
from partyparty.domain.service import DeviceBindingService
from partyparty.domain.value import DevicePlatform, PushToken, platform_tag


class SyncDeviceRequest(BaseModel):
    """Request to bind this installation's push token to the signed-in user."""

    identity: UserIdentity
    push_token: PushToken
    platform: DevicePlatform


class SyncDeviceResponse(BaseModel):
    """Device as bound."""

    device_id: str
    user_id: str
    # Stored tag, which may predate the platforms this API accepts
    platform: str
    updated_at: datetime


class SyncDeviceUseCase(BaseUseCase[SyncDeviceRequest, SyncDeviceResponse]):
    """Use case for registering a push device after sign-in."""

    def __init__(self, device_binding_service: DeviceBindingService) -> None:
        """Initialize use case.

        Args:
            device_binding_service: Device binding domain service
        """
        self.device_binding_service = device_binding_service

    async def execute(self, request: SyncDeviceRequest) -> SyncDeviceResponse:
        """Bind the device and return it.

        Raises:
            NotAuthenticatedError: If the identity has no credential
            SyncFailure: If the record store fails
        """
        with logfire.span("sync_device", user_id=request.identity.user_id):
            device = await self.device_binding_service.bind_device(
                request.identity, request.push_token, request.platform
            )

            return SyncDeviceResponse(
                device_id=device.id,
                user_id=device.user_id,
                platform=platform_tag(device.platform),
                updated_at=device.updated_at,
            )
