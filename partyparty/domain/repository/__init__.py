"""Repository interfaces for the PartyParty domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from partyparty.domain.repository.device import DeviceRepository
from partyparty.domain.repository.guest import GuestRepository
from partyparty.domain.repository.host import HostRepository
from partyparty.domain.repository.invite import InviteRepository
from partyparty.domain.repository.party import PartyRepository

__all__ = [
    "DeviceRepository",
    "GuestRepository",
    "HostRepository",
    "InviteRepository",
    "PartyRepository",
]
