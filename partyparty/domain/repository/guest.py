"""Guest repository interface."""

from abc import ABC, abstractmethod

from partyparty.domain.model.guest import Guest
from partyparty.domain.value import GuestId, PhoneNumber


class GuestRepository(ABC):
    """Repository for Guest entity."""

    @abstractmethod
    async def list_all(self, credential: str) -> list[Guest]:
        """List the guests visible to the credential's user."""
        pass

    @abstractmethod
    async def find_by_id(self, credential: str, guest_id: GuestId) -> Guest | None:
        """Find a guest by id."""
        pass

    @abstractmethod
    async def create(
        self, credential: str, name: str, email: str, phone: PhoneNumber
    ) -> Guest:
        """Create a guest record."""
        pass

    @abstractmethod
    async def update(self, credential: str, guest: Guest) -> Guest:
        """Replace a guest record."""
        pass
