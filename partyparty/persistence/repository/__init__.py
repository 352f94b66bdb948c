"""Record store repository implementations."""

from partyparty.persistence.repository.device import RecordStoreDeviceRepository
from partyparty.persistence.repository.guest import RecordStoreGuestRepository
from partyparty.persistence.repository.host import RecordStoreHostRepository
from partyparty.persistence.repository.invite import RecordStoreInviteRepository
from partyparty.persistence.repository.party import RecordStorePartyRepository

__all__ = [
    "RecordStoreDeviceRepository",
    "RecordStoreGuestRepository",
    "RecordStoreHostRepository",
    "RecordStoreInviteRepository",
    "RecordStorePartyRepository",
]
