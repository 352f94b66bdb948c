"""Domain layer DI providers."""

from dishka import Scope, provide

from partyparty.domain.repository import (
    DeviceRepository,
    GuestRepository,
    HostRepository,
    InviteRepository,
    PartyRepository,
)
from partyparty.domain.service import (
    AuthService,
    DeviceBindingService,
    GuestService,
    HostBindingService,
    IdentityProviderClient,
    MembershipService,
    PartyService,
    RsvpService,
)
from partyparty.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, identity_client: IdentityProviderClient) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(identity_client=identity_client)

    @provide
    def get_device_binding_service(
        self, device_repository: DeviceRepository
    ) -> DeviceBindingService:
        """Provide device binding domain service."""
        return DeviceBindingService(device_repository=device_repository)

    @provide
    def get_host_binding_service(
        self, host_repository: HostRepository
    ) -> HostBindingService:
        """Provide host binding domain service."""
        return HostBindingService(host_repository=host_repository)

    @provide
    def get_membership_service(
        self, invite_repository: InviteRepository
    ) -> MembershipService:
        """Provide membership reconciliation domain service."""
        return MembershipService(invite_repository=invite_repository)

    @provide
    def get_rsvp_service(self, invite_repository: InviteRepository) -> RsvpService:
        """Provide RSVP domain service."""
        return RsvpService(invite_repository=invite_repository)

    @provide
    def get_party_service(
        self,
        party_repository: PartyRepository,
        invite_repository: InviteRepository,
    ) -> PartyService:
        """Provide party domain service."""
        return PartyService(
            party_repository=party_repository, invite_repository=invite_repository
        )

    @provide
    def get_guest_service(self, guest_repository: GuestRepository) -> GuestService:
        """Provide guest domain service."""
        return GuestService(guest_repository=guest_repository)
