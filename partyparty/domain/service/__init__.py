"""Domain services."""

from .auth_service import AuthService, IdentityProviderClient
from .base import Service
from .device_binding_service import DeviceBindingService
from .guest_service import GuestService
from .host_binding_service import (
    HOST_LOOKUP_ORDER,
    HostBindingService,
    HostByEmailLookup,
    HostByOwnerLookup,
    HostLookup,
)
from .membership_service import MembershipService, compute_delta
from .party_service import PartyService, format_invitation_message
from .rsvp_service import RSVP_TRANSITIONS, RsvpService, advance, next_rsvp_state

__all__ = [
    "AuthService",
    "DeviceBindingService",
    "GuestService",
    "HOST_LOOKUP_ORDER",
    "HostBindingService",
    "HostByEmailLookup",
    "HostByOwnerLookup",
    "HostLookup",
    "IdentityProviderClient",
    "MembershipService",
    "PartyService",
    "RSVP_TRANSITIONS",
    "RsvpService",
    "Service",
    "advance",
    "compute_delta",
    "format_invitation_message",
    "next_rsvp_state",
]
