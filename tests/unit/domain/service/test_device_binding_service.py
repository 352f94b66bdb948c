"""Unit tests for DeviceBindingService."""

from datetime import datetime, timezone

import pytest

from partyparty.adapter.recordstore import InMemoryRecordStoreClient
from partyparty.domain.error import NotAuthenticatedError, SyncFailure
from partyparty.domain.service import DeviceBindingService
from partyparty.domain.value import Collection, DevicePlatform, PushToken
from tests.conftest import make_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

TOKEN = PushToken("ExponentPushToken[abc123]")


class TestBindDevice:
    """Tests for bind_device."""

    @pytest.mark.asyncio
    async def test_creates_device_when_token_unknown(self, unit_env):
        """An unknown token should create one device owned by the user."""
        service = await unit_env.get(DeviceBindingService)
        store = await unit_env.get(InMemoryRecordStoreClient)
        alice = make_identity("user-alice")

        device = await service.bind_device(alice, TOKEN, DevicePlatform.IOS)

        assert device.user_id == "user-alice"
        assert device.token == TOKEN
        assert device.platform == DevicePlatform.IOS
        assert len(store.records[Collection.DEVICE]) == 1
        assert [op.operation for op in store.operations] == ["create"]

    @pytest.mark.asyncio
    async def test_second_bind_writes_nothing(self, unit_env):
        """Binding twice with no external change should be a no-op."""
        service = await unit_env.get(DeviceBindingService)
        store = await unit_env.get(InMemoryRecordStoreClient)
        alice = make_identity("user-alice")

        first = await service.bind_device(alice, TOKEN, DevicePlatform.IOS)
        writes_after_first = len(store.operations)

        second = await service.bind_device(alice, TOKEN, DevicePlatform.IOS)

        assert second == first
        assert len(store.operations) == writes_after_first

    @pytest.mark.asyncio
    async def test_reassigns_device_owned_by_another_user(self, unit_env):
        """A token registered to someone else should move to the new user."""
        store = await unit_env.get(InMemoryRecordStoreClient)
        stale_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
        [seeded] = store.seed(
            Collection.DEVICE,
            {
                "user_id": "user-bob",
                "token": TOKEN.root,
                "platform": "android",
                "updated_at": stale_time.isoformat(),
            },
        )
        service = await unit_env.get(DeviceBindingService)
        alice = make_identity("user-alice")

        device = await service.bind_device(alice, TOKEN, DevicePlatform.IOS)

        assert device.id == seeded["id"]
        assert device.user_id == "user-alice"
        assert device.token == TOKEN
        assert device.platform == DevicePlatform.IOS
        assert device.updated_at > stale_time
        assert store.writes("update") and not store.writes("create")
        assert len(store.records[Collection.DEVICE]) == 1

    @pytest.mark.asyncio
    async def test_refresh_timestamp_uses_clock(self, unit_env):
        """The refreshed timestamp should come from the injected clock."""
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.DEVICE,
            {"user_id": "user-bob", "token": TOKEN.root, "platform": "ios"},
        )
        fixed = datetime(2030, 5, 1, 12, 0, tzinfo=timezone.utc)
        service = DeviceBindingService(
            (await unit_env.get(DeviceBindingService)).device_repository,
            clock=lambda: fixed,
        )

        device = await service.bind_device(make_identity(), TOKEN, DevicePlatform.WEB)

        assert device.updated_at == fixed
        stored = next(iter(store.records[Collection.DEVICE].values()))
        assert stored["updated_at"] == fixed.isoformat()

    @pytest.mark.asyncio
    async def test_requires_authenticated_identity(self, unit_env):
        """No store call should happen without a credential."""
        service = await unit_env.get(DeviceBindingService)
        store = await unit_env.get(InMemoryRecordStoreClient)

        with pytest.raises(NotAuthenticatedError):
            await service.bind_device(None, TOKEN, DevicePlatform.IOS)

        assert store.operations == []

    @pytest.mark.asyncio
    async def test_store_failure_surfaces_as_sync_failure(self, unit_env):
        """A failed create should raise SyncFailure and leave nothing behind."""
        service = await unit_env.get(DeviceBindingService)
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.inject_failure("create", Collection.DEVICE)

        with pytest.raises(SyncFailure) as exc_info:
            await service.bind_device(make_identity(), TOKEN, DevicePlatform.IOS)

        assert exc_info.value.operation == "create"
        assert exc_info.value.collection == "user_device"
        assert store.records[Collection.DEVICE] == {}

    @pytest.mark.asyncio
    async def test_rerun_after_failure_converges(self, unit_env):
        """Re-triggering after a failure should bind the device."""
        service = await unit_env.get(DeviceBindingService)
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.inject_failure("create", Collection.DEVICE)

        with pytest.raises(SyncFailure):
            await service.bind_device(make_identity(), TOKEN, DevicePlatform.IOS)

        store.clear_failures()
        device = await service.bind_device(make_identity(), TOKEN, DevicePlatform.IOS)

        assert device.user_id == "user-alice"
        assert len(store.records[Collection.DEVICE]) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stored_platform", ["macos", "tizen"])
    async def test_reassigns_device_with_unrecognised_platform(
        self, unit_env, stored_platform
    ):
        """A stored platform tag outside the known set should not block binding."""
        store = await unit_env.get(InMemoryRecordStoreClient)
        [seeded] = store.seed(
            Collection.DEVICE,
            {"user_id": "user-bob", "token": TOKEN.root, "platform": stored_platform},
        )
        service = await unit_env.get(DeviceBindingService)

        device = await service.bind_device(
            make_identity("user-alice"), TOKEN, DevicePlatform.IOS
        )

        assert device.id == seeded["id"]
        assert device.user_id == "user-alice"
        assert store.records[Collection.DEVICE][seeded["id"]]["platform"] == "ios"
        assert len(store.records[Collection.DEVICE]) == 1

    @pytest.mark.asyncio
    async def test_own_device_with_unrecognised_platform_is_kept(self, unit_env):
        """An owned device keeps its stored tag and is not rewritten."""
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.DEVICE,
            {"user_id": "user-alice", "token": TOKEN.root, "platform": "tizen"},
        )
        service = await unit_env.get(DeviceBindingService)

        device = await service.bind_device(
            make_identity("user-alice"), TOKEN, DevicePlatform.IOS
        )

        assert device.platform == "tizen"
        assert store.operations == []


class TestUnbindDevice:
    """Tests for unbind_device."""

    @pytest.mark.asyncio
    async def test_deletes_own_device(self, unit_env):
        """Signing out should delete the user's device record."""
        service = await unit_env.get(DeviceBindingService)
        store = await unit_env.get(InMemoryRecordStoreClient)
        alice = make_identity("user-alice")
        await service.bind_device(alice, TOKEN, DevicePlatform.IOS)

        removed = await service.unbind_device(alice, TOKEN)

        assert removed is True
        assert store.records[Collection.DEVICE] == {}

    @pytest.mark.asyncio
    async def test_keeps_device_owned_by_another_user(self, unit_env):
        """A device already claimed by another account should not be deleted."""
        service = await unit_env.get(DeviceBindingService)
        store = await unit_env.get(InMemoryRecordStoreClient)
        await service.bind_device(make_identity("user-bob"), TOKEN, DevicePlatform.IOS)

        removed = await service.unbind_device(make_identity("user-alice"), TOKEN)

        assert removed is False
        assert len(store.records[Collection.DEVICE]) == 1

    @pytest.mark.asyncio
    async def test_unknown_token_is_noop(self, unit_env):
        """Unbinding an unregistered token should write nothing."""
        service = await unit_env.get(DeviceBindingService)
        store = await unit_env.get(InMemoryRecordStoreClient)

        assert await service.unbind_device(make_identity(), TOKEN) is False
        assert store.operations == []

    @pytest.mark.asyncio
    async def test_deletes_device_with_unrecognised_platform(self, unit_env):
        """Sign-out should remove a device whatever its stored platform tag."""
        store = await unit_env.get(InMemoryRecordStoreClient)
        store.seed(
            Collection.DEVICE,
            {"user_id": "user-alice", "token": TOKEN.root, "platform": "tizen"},
        )
        service = await unit_env.get(DeviceBindingService)

        assert await service.unbind_device(make_identity("user-alice"), TOKEN) is True
        assert store.records[Collection.DEVICE] == {}
