"""Unit tests for the RSVP state machine."""

import pytest

from partyparty.adapter.recordstore import InMemoryRecordStoreClient
from partyparty.domain.error import NotFoundError
from partyparty.domain.model import Invite
from partyparty.domain.service import RsvpService, advance, next_rsvp_state
from partyparty.domain.value import Collection, GuestId, InviteId, PartyId, RsvpState
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PARTY = PartyId("party-1")


def _invite(state: RsvpState = RsvpState.PENDING) -> Invite:
    return Invite(
        id=InviteId("i1"), party_id=PARTY, guest_id=GuestId("g1"), state=state
    )


class TestTransitions:
    """Tests for the pure transition functions."""

    @pytest.mark.parametrize(
        ("state", "expected"),
        [
            (RsvpState.PENDING, RsvpState.ACCEPTED),
            (RsvpState.ACCEPTED, RsvpState.DECLINED),
            (RsvpState.DECLINED, RsvpState.MAYBE),
            (RsvpState.MAYBE, RsvpState.PENDING),
        ],
    )
    def test_cycle_order(self, state, expected):
        assert next_rsvp_state(state) == expected

    def test_absent_or_unknown_state_counts_as_pending(self):
        assert next_rsvp_state(None) == RsvpState.ACCEPTED
        assert next_rsvp_state("attending") == RsvpState.ACCEPTED

    @pytest.mark.parametrize("state", list(RsvpState))
    def test_four_advances_return_to_start(self, state):
        invite = _invite(state)

        result = advance(advance(advance(advance(invite))))

        assert result.state == state

    def test_advance_does_not_mutate_input(self):
        invite = _invite()

        advanced = advance(invite)

        assert invite.state == RsvpState.PENDING
        assert advanced.state == RsvpState.ACCEPTED
        assert advanced.id == invite.id

    def test_invite_without_state_defaults_to_pending(self):
        invite = Invite(id="i1", party_id="p1", guest_id="g1", state=None)

        assert invite.state == RsvpState.PENDING


class TestAdvanceRsvp:
    """Tests for the two-phase advance."""

    @pytest.mark.asyncio
    async def test_confirmed_change(self, unit_env):
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": PARTY, "guest_id": "g1", "state": "pending"},
        )
        service = await unit_env.get(RsvpService)

        change = await service.advance_rsvp(make_identity(), _invite())

        assert change.previous == RsvpState.PENDING
        assert change.local.state == RsvpState.ACCEPTED
        assert change.confirmed.state == RsvpState.ACCEPTED
        assert change.is_confirmed
        assert store.records[Collection.INVITE]["i1"]["state"] == "accepted"

    @pytest.mark.asyncio
    async def test_failed_write_keeps_local_state(self, unit_env):
        """A persistence failure should be reported without reverting."""
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": PARTY, "guest_id": "g1", "state": "accepted"},
        )
        store.inject_failure("update", Collection.INVITE, record_id="i1")
        service = await unit_env.get(RsvpService)

        change = await service.advance_rsvp(make_identity(), _invite(RsvpState.ACCEPTED))

        assert change.local.state == RsvpState.DECLINED
        assert change.confirmed is None
        assert not change.is_confirmed
        assert "update" in change.error
        assert store.records[Collection.INVITE]["i1"]["state"] == "accepted"

    @pytest.mark.asyncio
    async def test_get_invite_not_found(self, unit_env):
        service = await unit_env.get(RsvpService)

        with pytest.raises(NotFoundError):
            await service.get_invite(make_identity(), InviteId("missing"))


class TestDetectDrift:
    """Tests for drift detection."""

    @pytest.mark.asyncio
    async def test_reports_unconfirmed_and_vanished_invites(self, unit_env):
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": PARTY, "guest_id": "g1", "state": "accepted"},
            {"id": "i2", "party_id": PARTY, "guest_id": "g2", "state": "maybe"},
        )
        service = await unit_env.get(RsvpService)
        local = [
            Invite(id="i1", party_id=PARTY, guest_id="g1", state=RsvpState.DECLINED),
            Invite(id="i2", party_id=PARTY, guest_id="g2", state=RsvpState.MAYBE),
            Invite(id="i3", party_id=PARTY, guest_id="g3", state=RsvpState.PENDING),
        ]

        drift = await service.detect_drift(make_identity(), PARTY, local)

        by_id = {d.invite_id: d for d in drift}
        assert set(by_id) == {"i1", "i3"}
        assert by_id["i1"].local_state == RsvpState.DECLINED
        assert by_id["i1"].remote_state == RsvpState.ACCEPTED
        assert by_id["i3"].remote_state is None

    @pytest.mark.asyncio
    async def test_no_drift_after_confirmed_advance(self, unit_env):
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": PARTY, "guest_id": "g1", "state": "pending"},
        )
        service = await unit_env.get(RsvpService)

        change = await service.advance_rsvp(make_identity(), _invite())
        drift = await service.detect_drift(make_identity(), PARTY, [change.local])

        assert drift == []
