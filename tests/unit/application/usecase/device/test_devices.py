"""Unit tests for the device use cases."""

import pytest

from partyparty.adapter.recordstore import InMemoryRecordStoreClient
from partyparty.application.usecase.device import (
    SignOutRequest,
    SignOutUseCase,
    SyncDeviceRequest,
    SyncDeviceUseCase,
)
from partyparty.domain.value import Collection, DevicePlatform, PushToken
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TOKEN = PushToken("ExponentPushToken[abc]")


class TestDeviceUseCases:
    """Tests for SyncDeviceUseCase and SignOutUseCase."""

    @pytest.mark.asyncio
    async def test_sync_then_sign_out(self, unit_env):
        """A synced device should be removed on sign-out."""
        store = await unit_env.get(InMemoryRecordStoreClient)
        sync = await unit_env.get(SyncDeviceUseCase)
        sign_out = await unit_env.get(SignOutUseCase)
        identity = make_identity()

        synced = await sync.execute(
            SyncDeviceRequest(
                identity=identity, push_token=TOKEN, platform=DevicePlatform.IOS
            )
        )
        assert synced.user_id == "user-alice"
        assert synced.device_id in store.records[Collection.DEVICE]

        response = await sign_out.execute(
            SignOutRequest(identity=identity, push_token=TOKEN)
        )

        assert response.device_removed
        assert store.records[Collection.DEVICE] == {}

    @pytest.mark.asyncio
    async def test_sign_out_without_device(self, unit_env):
        """Signing out with no device should report nothing removed."""
        sign_out = await unit_env.get(SignOutUseCase)

        response = await sign_out.execute(
            SignOutRequest(identity=make_identity(), push_token=TOKEN)
        )

        assert not response.device_removed
