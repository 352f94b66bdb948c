"""Party repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from partyparty.domain.model.party import Party
from partyparty.domain.value import PartyId, UserId


class PartyRepository(ABC):
    """Repository for Party entity."""

    @abstractmethod
    async def list_all(self, credential: str) -> list[Party]:
        """List the parties visible to the credential's user."""
        pass

    @abstractmethod
    async def find_by_id(self, credential: str, party_id: PartyId) -> Party | None:
        """Find a party by id."""
        pass

    @abstractmethod
    async def create(
        self,
        credential: str,
        title: str,
        details: str,
        scheduled_for: datetime,
        user_id: UserId,
    ) -> Party:
        """Create a party record."""
        pass

    @abstractmethod
    async def update(self, credential: str, party: Party) -> Party:
        """Replace a party record."""
        pass
