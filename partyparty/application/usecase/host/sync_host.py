"""Sync host use case."""

import logfire
from pydantic import BaseModel

from partyparty.application.usecase.base import BaseUseCase
from partyparty.domain.model import Host, UserIdentity
from partyparty.domain.service import HostBindingService


class HostItem(BaseModel):
    """Host profile in responses."""

    host_id: str
    user_id: str
    email: str
    name: str

    @classmethod
    def from_host(cls, host: Host) -> "HostItem":
        return cls(host_id=host.id, user_id=host.user_id, email=host.email, name=host.name)


class SyncHostRequest(BaseModel):
    """Request to link the host profile on sign-in."""

    identity: UserIdentity


class SyncHostResponse(BaseModel):
    """Linked host, None when the user has no host profile yet."""

    host: HostItem | None = None


class SyncHostUseCase(BaseUseCase[SyncHostRequest, SyncHostResponse]):
    """Use case for refreshing the host profile link after sign-in."""

    def __init__(self, host_binding_service: HostBindingService) -> None:
        """Initialize use case.

        Args:
            host_binding_service: Host binding domain service
        """
        self.host_binding_service = host_binding_service

    async def execute(self, request: SyncHostRequest) -> SyncHostResponse:
        with logfire.span("sync_host", user_id=request.identity.user_id):
            host = await self.host_binding_service.bind_host(request.identity)
            return SyncHostResponse(host=HostItem.from_host(host) if host else None)
