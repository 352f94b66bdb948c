"""Unit tests for GuestService."""

import pytest

from partyparty.adapter.recordstore import InMemoryRecordStoreClient
from partyparty.domain.error import NotFoundError, ValidationError
from partyparty.domain.service import GuestService
from partyparty.domain.value import Collection, GuestId
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestValidateContact:
    """Tests for guest contact validation."""

    @pytest.mark.parametrize(
        ("name", "email", "phone", "message"),
        [
            ("", "bob@example.com", "+1 555 0100", "required"),
            ("Bob", "", "+1 555 0100", "required"),
            ("Bob", "bob@example.com", "", "required"),
            ("Bob", "bob.example.com", "+1 555 0100", "email"),
            ("Bob", "bob@example.com", "555", "phone"),
            ("Bob", "bob@example.com", "call me", "phone"),
        ],
    )
    def test_rejects_invalid_contact(self, name, email, phone, message):
        with pytest.raises(ValidationError, match=message):
            GuestService.validate_contact(name, email, phone)

    @pytest.mark.parametrize("phone", ["+1 555-0100", "5550100", "+44 20 7946 0958"])
    def test_accepts_valid_phone(self, phone):
        assert GuestService.validate_contact("Bob", "bob@example.com", phone).root == phone


class TestGuestCrud:
    """Tests for guest create/update/list."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, unit_env):
        service = await unit_env.get(GuestService)
        identity = make_identity()

        created = await service.create_guest(identity, "Bob", "bob@example.com", "5550100")
        guests = await service.list_guests(identity)

        assert guests == [created]

    @pytest.mark.asyncio
    async def test_update_guest(self, unit_env):
        service = await unit_env.get(GuestService)
        store = await unit_env.get(InMemoryRecordStoreClient)
        identity = make_identity()
        guest = await service.create_guest(identity, "Bob", "bob@example.com", "5550100")

        updated = await service.update_guest(
            identity, guest, "Robert", "robert@example.com", "5550101"
        )

        assert updated.id == guest.id
        assert store.records[Collection.GUEST][guest.id]["name"] == "Robert"
        assert store.records[Collection.GUEST][guest.id]["phone"] == "5550101"

    @pytest.mark.asyncio
    async def test_get_missing_guest(self, unit_env):
        service = await unit_env.get(GuestService)

        with pytest.raises(NotFoundError):
            await service.get_guest(make_identity(), GuestId("nope"))
