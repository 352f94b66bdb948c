"""Guest use cases."""

from partyparty.application.usecase.guest.create_guest import (
    CreateGuestRequest,
    CreateGuestResponse,
    CreateGuestUseCase,
)
from partyparty.application.usecase.guest.list_guests import (
    GuestItem,
    ListGuestsRequest,
    ListGuestsResponse,
    ListGuestsUseCase,
)
from partyparty.application.usecase.guest.update_guest import (
    UpdateGuestRequest,
    UpdateGuestResponse,
    UpdateGuestUseCase,
)

__all__ = [
    "CreateGuestRequest",
    "CreateGuestResponse",
    "CreateGuestUseCase",
    "GuestItem",
    "ListGuestsRequest",
    "ListGuestsResponse",
    "ListGuestsUseCase",
    "UpdateGuestRequest",
    "UpdateGuestResponse",
    "UpdateGuestUseCase",
]
