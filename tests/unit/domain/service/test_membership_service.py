"""Unit tests for MembershipService and compute_delta."""

import pytest

from partyparty.adapter.recordstore import InMemoryRecordStoreClient
from partyparty.domain.error import (
    NotAuthenticatedError,
    PartialReconciliationError,
    ValidationError,
)
from partyparty.domain.model import Invite
from partyparty.domain.repository import InviteRepository
from partyparty.domain.service import MembershipService, compute_delta
from partyparty.domain.value import (
    Collection,
    GuestId,
    InviteId,
    MembershipOperation,
    PartyId,
    RsvpState,
)
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PARTY = PartyId("party-1")


def _invite(invite_id: str, guest_id: str, party_id: str = PARTY) -> Invite:
    return Invite(
        id=InviteId(invite_id), party_id=PartyId(party_id), guest_id=GuestId(guest_id)
    )


CREDENTIAL = "mock:user-alice:alice@example.com"


async def _current_guests(
    repo: InviteRepository, party_id: PartyId = PARTY
) -> set[str]:
    invites = await repo.find_by_party(CREDENTIAL, party_id)
    return {invite.guest_id for invite in invites}


class TestComputeDelta:
    """Tests for the pure delta computation."""

    def test_adds_and_removes(self):
        original = [_invite("i1", "g1"), _invite("i2", "g2")]

        delta = compute_delta(original, ["g2", "g3"])

        assert delta.to_add == {"g3"}
        assert [i.id for i in delta.to_remove] == ["i1"]
        assert delta.operation_count == 2

    def test_add_and_remove_are_disjoint(self):
        original = [_invite("i1", "g1"), _invite("i2", "g2"), _invite("i3", "g4")]

        delta = compute_delta(original, ["g1", "g3", "g5"])

        removed = {i.guest_id for i in delta.to_remove}
        assert delta.to_add.isdisjoint(removed)

    def test_same_selection_is_empty(self):
        original = [_invite("i1", "g1"), _invite("i2", "g2")]

        assert compute_delta(original, ["g2", "g1"]).is_empty

    def test_empty_selection_removes_everything(self):
        original = [_invite("i1", "g1"), _invite("i2", "g2")]

        delta = compute_delta(original, [])

        assert delta.to_add == frozenset()
        assert {i.id for i in delta.to_remove} == {"i1", "i2"}

    def test_duplicate_invites_for_deselected_guest_all_removed(self):
        original = [_invite("i1", "g1"), _invite("i2", "g1")]

        delta = compute_delta(original, [])

        assert {i.id for i in delta.to_remove} == {"i1", "i2"}

    def test_duplicate_invites_for_kept_guest_untouched(self):
        original = [_invite("i1", "g1"), _invite("i2", "g1")]

        assert compute_delta(original, ["g1"]).is_empty


class TestReconcile:
    """Tests for reconcile against the in-memory store."""

    @pytest.mark.asyncio
    async def test_full_success_converges_to_selection(self, unit_env):
        """After success the invite guest ids should equal the selection."""
        service = await unit_env.get(MembershipService)
        repo = await unit_env.get(InviteRepository)
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": PARTY, "guest_id": "g1", "state": "accepted"},
            {"id": "i2", "party_id": PARTY, "guest_id": "g2", "state": "pending"},
        )
        original = await repo.find_by_party(CREDENTIAL, PARTY)

        outcome = await service.reconcile(make_identity(), PARTY, original, ["g2", "g3"])

        assert outcome.is_complete
        assert len(outcome.results) == 2
        assert len(store.operations) == 2
        assert await _current_guests(repo) == {"g2", "g3"}

    @pytest.mark.asyncio
    async def test_new_invites_are_pending(self, unit_env):
        service = await unit_env.get(MembershipService)
        repo = await unit_env.get(InviteRepository)

        await service.reconcile(make_identity(), PARTY, [], ["g1"])

        [invite] = await repo.find_by_party(CREDENTIAL, PARTY)
        assert invite.state == RsvpState.PENDING

    @pytest.mark.asyncio
    async def test_second_run_is_noop(self, unit_env):
        """Reconciling again against the new state should issue no writes."""
        service = await unit_env.get(MembershipService)
        repo = await unit_env.get(InviteRepository)
        store = await unit_env.get(InMemoryRecordStoreClient)
        identity = make_identity()

        await service.reconcile(identity, PARTY, [], ["g1", "g2"])
        writes = len(store.operations)
        current = await repo.find_by_party(identity.credential.get_secret_value(), PARTY)

        outcome = await service.reconcile(identity, PARTY, current, ["g1", "g2"])

        assert outcome.results == ()
        assert len(store.operations) == writes

    @pytest.mark.asyncio
    async def test_keeps_other_parties_untouched(self, unit_env):
        service = await unit_env.get(MembershipService)
        repo = await unit_env.get(InviteRepository)
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "other", "party_id": "party-2", "guest_id": "g1"},
        )

        await service.reconcile(make_identity(), PARTY, [], ["g1"])

        assert await _current_guests(repo, PartyId("party-2")) == {"g1"}
        assert await _current_guests(repo) == {"g1"}

    @pytest.mark.asyncio
    async def test_partial_failure_reports_and_keeps_successes(self, unit_env):
        """A failed create should be reported; other writes stay applied."""
        service = await unit_env.get(MembershipService)
        repo = await unit_env.get(InviteRepository)
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": PARTY, "guest_id": "g1"},
        )
        store.inject_failure("create", Collection.INVITE, fields={"guest_id": "g3"})
        identity = make_identity()
        original = await repo.find_by_party(identity.credential.get_secret_value(), PARTY)

        outcome = await service.reconcile(identity, PARTY, original, ["g2", "g3"])

        assert not outcome.is_complete
        assert outcome.failed_additions == {"g3"}
        assert outcome.failed_removals == set()
        assert {(r.operation, r.guest_id) for r in outcome.succeeded} == {
            (MembershipOperation.ADD, "g2"),
            (MembershipOperation.REMOVE, "g1"),
        }
        assert await _current_guests(repo) == {"g2"}

        with pytest.raises(PartialReconciliationError) as exc_info:
            outcome.raise_for_failures()
        assert exc_info.value.outcome is outcome

    @pytest.mark.asyncio
    async def test_rerun_after_partial_failure_applies_remainder(self, unit_env):
        """Re-running should issue exactly the operations that failed."""
        service = await unit_env.get(MembershipService)
        repo = await unit_env.get(InviteRepository)
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": PARTY, "guest_id": "g1"},
            {"id": "i2", "party_id": PARTY, "guest_id": "g2"},
        )
        store.inject_failure("delete", Collection.INVITE, record_id="i1")
        store.inject_failure("create", Collection.INVITE, fields={"guest_id": "g4"})
        identity = make_identity()
        credential = identity.credential.get_secret_value()

        first = await service.reconcile(
            identity, PARTY, await repo.find_by_party(credential, PARTY), ["g3", "g4"]
        )
        assert first.failed_additions == {"g4"}
        assert first.failed_removals == {"g1"}

        store.clear_failures()
        second = await service.reconcile(
            identity, PARTY, await repo.find_by_party(credential, PARTY), ["g3", "g4"]
        )

        assert second.is_complete
        assert {(r.operation, r.guest_id) for r in second.results} == {
            (MembershipOperation.ADD, "g4"),
            (MembershipOperation.REMOVE, "g1"),
        }
        assert await _current_guests(repo) == {"g3", "g4"}

    @pytest.mark.asyncio
    async def test_empty_selection_is_valid(self, unit_env):
        service = await unit_env.get(MembershipService)
        repo = await unit_env.get(InviteRepository)
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(Collection.INVITE, {"id": "i1", "party_id": PARTY, "guest_id": "g1"})
        original = await repo.find_by_party(CREDENTIAL, PARTY)

        outcome = await service.reconcile(make_identity(), PARTY, original, [])

        assert outcome.is_complete
        assert await _current_guests(repo) == set()

    @pytest.mark.asyncio
    async def test_invite_removed_concurrently_counts_as_removed(self, unit_env):
        """An invite another session already deleted should not be a failure."""
        service = await unit_env.get(MembershipService)
        repo = await unit_env.get(InviteRepository)
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": PARTY, "guest_id": "g1"},
            {"id": "i2", "party_id": PARTY, "guest_id": "g2"},
        )
        original = await repo.find_by_party(CREDENTIAL, PARTY)
        del store.records[Collection.INVITE]["i1"]

        outcome = await service.reconcile(make_identity(), PARTY, original, [])

        assert outcome.is_complete
        assert outcome.failed_removals == set()
        assert {r.guest_id for r in outcome.succeeded} == {"g1", "g2"}
        assert await _current_guests(repo) == set()
        outcome.raise_for_failures()

    @pytest.mark.asyncio
    async def test_rejects_malformed_ids_before_any_write(self, unit_env):
        service = await unit_env.get(MembershipService)
        store = await unit_env.get(InMemoryRecordStoreClient)

        with pytest.raises(ValidationError):
            await service.reconcile(make_identity(), PARTY, [], ["g1", "bad id"])
        with pytest.raises(ValidationError):
            await service.reconcile(make_identity(), PartyId(""), [], ["g1"])

        assert store.operations == []

    @pytest.mark.asyncio
    async def test_rejects_invites_of_another_party(self, unit_env):
        service = await unit_env.get(MembershipService)

        with pytest.raises(ValidationError):
            await service.reconcile(
                make_identity(), PARTY, [_invite("i1", "g1", party_id="party-2")], []
            )

    @pytest.mark.asyncio
    async def test_requires_identity(self, unit_env):
        service = await unit_env.get(MembershipService)

        with pytest.raises(NotAuthenticatedError):
            await service.reconcile(None, PARTY, [], ["g1"])
