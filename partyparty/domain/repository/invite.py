"""Invite repository interface."""

from abc import ABC, abstractmethod

from partyparty.domain.model.invite import Invite
from partyparty.domain.value import GuestId, InviteId, PartyId, RsvpState


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, credential: str, invite_id: InviteId) -> Invite | None:
        """Find an invite by id.

        Args:
            credential: Bearer credential
            invite_id: The invite's identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_party(self, credential: str, party_id: PartyId) -> list[Invite]:
        """Find all invites of a party.

        Args:
            credential: Bearer credential
            party_id: Party whose invitation set is requested

        Returns:
            Invites of the party (may be empty)
        """
        pass

    @abstractmethod
    async def create(
        self,
        credential: str,
        party_id: PartyId,
        guest_id: GuestId,
        state: RsvpState = RsvpState.PENDING,
    ) -> Invite:
        """Create an invite record."""
        pass

    @abstractmethod
    async def update(self, credential: str, invite: Invite) -> Invite:
        """Replace an invite record."""
        pass

    @abstractmethod
    async def delete(self, credential: str, invite_id: InviteId) -> None:
        """Delete an invite record."""
        pass
