"""Application layer DI providers."""

from dishka import Scope, provide

from partyparty.application.usecase.device import SignOutUseCase, SyncDeviceUseCase
from partyparty.application.usecase.guest import (
    CreateGuestUseCase,
    ListGuestsUseCase,
    UpdateGuestUseCase,
)
from partyparty.application.usecase.host import SignUpUseCase, SyncHostUseCase
from partyparty.application.usecase.invite import (
    AdvanceRsvpUseCase,
    DetectRsvpDriftUseCase,
)
from partyparty.application.usecase.party import (
    CreatePartyUseCase,
    GetPartyInvitationsUseCase,
    ListPartiesUseCase,
    UpdatePartyUseCase,
)
from partyparty.config import Settings
from partyparty.domain.service import (
    AuthService,
    DeviceBindingService,
    GuestService,
    HostBindingService,
    MembershipService,
    PartyService,
    RsvpService,
)
from partyparty.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Device use cases
    @provide
    def get_sync_device_use_case(
        self, device_binding_service: DeviceBindingService
    ) -> SyncDeviceUseCase:
        """Provide sync device use case."""
        return SyncDeviceUseCase(device_binding_service=device_binding_service)

    @provide
    def get_sign_out_use_case(
        self, device_binding_service: DeviceBindingService
    ) -> SignOutUseCase:
        """Provide sign out use case."""
        return SignOutUseCase(device_binding_service=device_binding_service)

    # Host use cases
    @provide
    def get_sync_host_use_case(
        self, host_binding_service: HostBindingService
    ) -> SyncHostUseCase:
        """Provide sync host use case."""
        return SyncHostUseCase(host_binding_service=host_binding_service)

    @provide
    def get_sign_up_use_case(
        self, host_binding_service: HostBindingService, auth_service: AuthService
    ) -> SignUpUseCase:
        """Provide sign up use case."""
        return SignUpUseCase(
            host_binding_service=host_binding_service, auth_service=auth_service
        )

    # Guest use cases
    @provide
    def get_list_guests_use_case(self, guest_service: GuestService) -> ListGuestsUseCase:
        """Provide list guests use case."""
        return ListGuestsUseCase(guest_service=guest_service)

    @provide
    def get_create_guest_use_case(
        self, guest_service: GuestService
    ) -> CreateGuestUseCase:
        """Provide create guest use case."""
        return CreateGuestUseCase(guest_service=guest_service)

    @provide
    def get_update_guest_use_case(
        self, guest_service: GuestService
    ) -> UpdateGuestUseCase:
        """Provide update guest use case."""
        return UpdateGuestUseCase(guest_service=guest_service)

    # Party use cases
    @provide
    def get_list_parties_use_case(
        self, party_service: PartyService
    ) -> ListPartiesUseCase:
        """Provide list parties use case."""
        return ListPartiesUseCase(party_service=party_service)

    @provide
    def get_create_party_use_case(
        self, party_service: PartyService, membership_service: MembershipService
    ) -> CreatePartyUseCase:
        """Provide create party use case."""
        return CreatePartyUseCase(
            party_service=party_service, membership_service=membership_service
        )

    @provide
    def get_update_party_use_case(
        self, party_service: PartyService, membership_service: MembershipService
    ) -> UpdatePartyUseCase:
        """Provide update party use case."""
        return UpdatePartyUseCase(
            party_service=party_service, membership_service=membership_service
        )

    @provide
    def get_party_invitations_use_case(
        self,
        party_service: PartyService,
        guest_service: GuestService,
        settings: Settings,
    ) -> GetPartyInvitationsUseCase:
        """Provide get party invitations use case."""
        return GetPartyInvitationsUseCase(
            party_service=party_service, guest_service=guest_service, settings=settings
        )

    # Invite use cases
    @provide
    def get_advance_rsvp_use_case(self, rsvp_service: RsvpService) -> AdvanceRsvpUseCase:
        """Provide advance RSVP use case."""
        return AdvanceRsvpUseCase(rsvp_service=rsvp_service)

    @provide
    def get_detect_rsvp_drift_use_case(
        self, rsvp_service: RsvpService
    ) -> DetectRsvpDriftUseCase:
        """Provide detect RSVP drift use case."""
        return DetectRsvpDriftUseCase(rsvp_service=rsvp_service)
