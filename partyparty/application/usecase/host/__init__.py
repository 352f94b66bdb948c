"""Host use cases."""

from partyparty.application.usecase.host.sign_up import (
    SignUpRequest,
    SignUpResponse,
    SignUpUseCase,
)
from partyparty.application.usecase.host.sync_host import (
    HostItem,
    SyncHostRequest,
    SyncHostResponse,
    SyncHostUseCase,
)

__all__ = [
    "HostItem",
    "SignUpRequest",
    "SignUpResponse",
    "SignUpUseCase",
    "SyncHostRequest",
    "SyncHostResponse",
    "SyncHostUseCase",
]
