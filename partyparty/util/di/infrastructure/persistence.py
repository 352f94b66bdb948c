"""Persistence infrastructure providers."""

from dishka import Scope, provide

from partyparty.adapter.recordstore import RecordStoreClient
from partyparty.domain.repository import (
    DeviceRepository,
    GuestRepository,
    HostRepository,
    InviteRepository,
    PartyRepository,
)
from partyparty.persistence.repository import (
    RecordStoreDeviceRepository,
    RecordStoreGuestRepository,
    RecordStoreHostRepository,
    RecordStoreInviteRepository,
    RecordStorePartyRepository,
)
from partyparty.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Repositories over whichever record store client is configured.

    Concrete: the record store component is the mockable seam.
    """

    scope = Scope.REQUEST

    @provide
    def get_device_repository(self, client: RecordStoreClient) -> DeviceRepository:
        """Provide Device repository."""
        return RecordStoreDeviceRepository(client)

    @provide
    def get_host_repository(self, client: RecordStoreClient) -> HostRepository:
        """Provide Host repository."""
        return RecordStoreHostRepository(client)

    @provide
    def get_guest_repository(self, client: RecordStoreClient) -> GuestRepository:
        """Provide Guest repository."""
        return RecordStoreGuestRepository(client)

    @provide
    def get_party_repository(self, client: RecordStoreClient) -> PartyRepository:
        """Provide Party repository."""
        return RecordStorePartyRepository(client)

    @provide
    def get_invite_repository(self, client: RecordStoreClient) -> InviteRepository:
        """Provide Invite repository."""
        return RecordStoreInviteRepository(client)
