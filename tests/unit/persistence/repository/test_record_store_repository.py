"""Unit tests for record store backed repositories."""

import pytest

from partyparty.adapter.recordstore import InMemoryRecordStoreClient
from partyparty.domain.error import SyncFailure
from partyparty.domain.value import Collection, RsvpState
from partyparty.persistence.repository import (
    RecordStoreGuestRepository,
    RecordStoreHostRepository,
    RecordStoreInviteRepository,
)

TOKEN = "token-123"


class TestRecordStoreRepository:
    """Tests for error translation and filtering."""

    @pytest.mark.asyncio
    async def test_store_error_becomes_sync_failure(self):
        """Should translate adapter errors into SyncFailure."""
        store = InMemoryRecordStoreClient()
        store.inject_failure("create", Collection.INVITE)
        repository = RecordStoreInviteRepository(store)

        with pytest.raises(SyncFailure) as exc_info:
            await repository.create(TOKEN, party_id="p1", guest_id="g1")

        assert exc_info.value.operation == "create"
        assert exc_info.value.collection == "invite"

    @pytest.mark.asyncio
    async def test_missing_credential_becomes_sync_failure(self):
        """Should report an unauthorized call as a failed operation."""
        repository = RecordStoreGuestRepository(InMemoryRecordStoreClient())

        with pytest.raises(SyncFailure):
            await repository.list_all("")

    @pytest.mark.asyncio
    async def test_malformed_record_becomes_sync_failure(self):
        """Should reject records that cannot be mapped."""
        store = InMemoryRecordStoreClient()
        store.seed(Collection.GUEST, {"id": "g1", "name": "Bob"})
        repository = RecordStoreGuestRepository(store)

        with pytest.raises(SyncFailure, match="malformed record"):
            await repository.find_by_id(TOKEN, "g1")

    @pytest.mark.asyncio
    async def test_non_mapping_find_item_becomes_sync_failure(self):
        """Should reject list items that are not records."""

        class ScalarItemsStore(InMemoryRecordStoreClient):
            async def find(self, collection, filters, credential):
                return ["oops", 42]

        repository = RecordStoreGuestRepository(ScalarItemsStore())

        with pytest.raises(SyncFailure, match="malformed record") as exc_info:
            await repository.list_all(TOKEN)

        assert exc_info.value.operation == "find"
        assert exc_info.value.record_id is None

    @pytest.mark.asyncio
    async def test_non_mapping_get_body_becomes_sync_failure(self):
        """Should reject a fetched record that is a list."""

        class ListBodyStore(InMemoryRecordStoreClient):
            async def get(self, collection, record_id, credential):
                return [{"id": record_id, "name": "Bob"}]

        repository = RecordStoreGuestRepository(ListBodyStore())

        with pytest.raises(SyncFailure, match="malformed record") as exc_info:
            await repository.find_by_id(TOKEN, "g1")

        assert exc_info.value.operation == "get"

    @pytest.mark.asyncio
    async def test_find_refilters_results(self):
        """Should drop records that do not match the filters."""

        class IgnoringFiltersStore(InMemoryRecordStoreClient):
            async def find(self, collection, filters, credential):
                return await super().find(collection, None, credential)

        store = IgnoringFiltersStore()
        store.seed(
            Collection.INVITE,
            {"id": "i1", "party_id": "p1", "guest_id": "g1", "state": "maybe"},
            {"id": "i2", "party_id": "p2", "guest_id": "g1"},
        )
        repository = RecordStoreInviteRepository(store)

        invites = await repository.find_by_party(TOKEN, "p1")

        assert [i.id for i in invites] == ["i1"]
        assert invites[0].state == RsvpState.MAYBE

    @pytest.mark.asyncio
    async def test_email_lookup_is_exact(self):
        """Should not match hosts by differently cased email."""
        store = InMemoryRecordStoreClient()
        store.seed(Collection.HOST, {"id": "h1", "email": "Alice@Example.com"})
        repository = RecordStoreHostRepository(store)

        assert await repository.find_by_email(TOKEN, "alice@example.com") is None
        host = await repository.find_by_email(TOKEN, "Alice@Example.com")
        assert host.id == "h1"
