"""Device use cases."""

from partyparty.application.usecase.device.sign_out import (
    SignOutRequest,
    SignOutResponse,
    SignOutUseCase,
)
from partyparty.application.usecase.device.sync_device import (
    SyncDeviceRequest,
    SyncDeviceResponse,
    SyncDeviceUseCase,
)

__all__ = [
    "SignOutRequest",
    "SignOutResponse",
    "SignOutUseCase",
    "SyncDeviceRequest",
    "SyncDeviceResponse",
    "SyncDeviceUseCase",
]
