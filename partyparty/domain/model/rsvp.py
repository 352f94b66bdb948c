"""Two-phase RSVP state.

An RSVP change is applied locally first and confirmed by the record store
afterwards; the two values are kept side by side so drift can be surfaced.
"""

from typing import Optional

from partyparty.domain.model.common import DomainModel
from partyparty.domain.model.invite import Invite
from partyparty.domain.value import GuestId, InviteId, RsvpState


class RsvpChange(DomainModel):
    """Result of advancing an invitation's RSVP state.

    ``local`` is the optimistic value the caller should display. ``confirmed``
    is the record as persisted, or None when persistence failed; the local
    value is not reverted in that case.
    """

    previous: RsvpState
    local: Invite
    confirmed: Optional[Invite] = None
    error: Optional[str] = None

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed is not None and self.confirmed.state == self.local.state


class RsvpDrift(DomainModel):
    """Mismatch between a locally held RSVP state and the remote one.

    ``remote_state`` is None when the invite no longer exists remotely.
    """

    invite_id: InviteId
    guest_id: GuestId
    local_state: RsvpState
    remote_state: Optional[RsvpState] = None
