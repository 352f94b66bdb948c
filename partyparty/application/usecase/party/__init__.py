"""Party use cases."""

from partyparty.application.usecase.party.create_party import (
    CreatePartyRequest,
    CreatePartyResponse,
    CreatePartyUseCase,
    MembershipItem,
)
from partyparty.application.usecase.party.get_party_invitations import (
    GetPartyInvitationsRequest,
    GetPartyInvitationsResponse,
    GetPartyInvitationsUseCase,
    InvitationItem,
)
from partyparty.application.usecase.party.list_parties import (
    ListPartiesRequest,
    ListPartiesResponse,
    ListPartiesUseCase,
    PartyItem,
)
from partyparty.application.usecase.party.update_party import (
    UpdatePartyRequest,
    UpdatePartyResponse,
    UpdatePartyUseCase,
)

__all__ = [
    "CreatePartyRequest",
    "CreatePartyResponse",
    "CreatePartyUseCase",
    "GetPartyInvitationsRequest",
    "GetPartyInvitationsResponse",
    "GetPartyInvitationsUseCase",
    "InvitationItem",
    "ListPartiesRequest",
    "ListPartiesResponse",
    "ListPartiesUseCase",
    "MembershipItem",
    "PartyItem",
    "UpdatePartyRequest",
    "UpdatePartyResponse",
    "UpdatePartyUseCase",
]
