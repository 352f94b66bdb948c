"""Host repository interface."""

from abc import ABC, abstractmethod

from partyparty.domain.model.host import Host
from partyparty.domain.value import UserId


class HostRepository(ABC):
    """Repository for Host entity."""

    @abstractmethod
    async def find_by_user_id(self, credential: str, user_id: UserId) -> Host | None:
        """Find the host owned by a user.

        Args:
            credential: Bearer credential
            user_id: Owner user id

        Returns:
            The first matching host, None if there is none
        """
        pass

    @abstractmethod
    async def find_by_email(self, credential: str, email: str) -> Host | None:
        """Find a host by exact email.

        Args:
            credential: Bearer credential
            email: Email to match, compared without normalisation

        Returns:
            The first matching host, None if there is none
        """
        pass

    @abstractmethod
    async def create(
        self, credential: str, user_id: UserId, email: str, name: str
    ) -> Host:
        """Create a host record."""
        pass

    @abstractmethod
    async def update(self, credential: str, host: Host) -> Host:
        """Replace a host record."""
        pass
