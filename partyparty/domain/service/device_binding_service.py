"""Device binding domain service."""

from datetime import datetime, timezone
from typing import Callable

import logfire

from partyparty.domain.model.device import Device
from partyparty.domain.model.user_identity import UserIdentity
from partyparty.domain.repository import DeviceRepository
from partyparty.domain.value import DevicePlatform, PushToken

from .base import Service


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DeviceBindingService(Service):
    """Keeps one device record per push token, owned by the signed-in user."""

    def __init__(
        self,
        device_repository: DeviceRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize device binding service.

        Args:
            device_repository: Device repository
            clock: Source of the refresh timestamp
        """
        self.device_repository = device_repository
        self.clock = clock

    async def bind_device(
        self,
        identity: UserIdentity,
        push_token: PushToken,
        platform: DevicePlatform,
    ) -> Device:
        """Bind the device registered under a push token to the current user.

        Steps:
        1. Look up the device by exact token
        2. Owned by the current user already: return it, no write
        3. Owned by someone else: reassign owner, refresh platform and timestamp
        4. Missing: create it

        Safe to re-run; a second call with no external change writes nothing.

        Args:
            identity: Signed-in user
            push_token: Push token of this installation
            platform: Platform tag of this installation

        Returns:
            The bound device

        Raises:
            NotAuthenticatedError: If identity has no credential
            SyncFailure: If a store operation fails
        """
        credential = self._credential_for(identity)

        with logfire.span(
            "device_binding_service.bind_device",
            user_id=identity.user_id,
            platform=platform.value,
        ):
            device = await self.device_repository.find_by_token(credential, push_token)

            if device is None:
                created = await self.device_repository.create(
                    credential,
                    user_id=identity.user_id,
                    token=push_token,
                    platform=platform,
                    updated_at=self.clock(),
                )
                logfire.info(
                    "Device created",
                    device_id=created.id,
                    user_id=identity.user_id,
                )
                return created

            if device.user_id == identity.user_id:
                logfire.info(
                    "Device already bound",
                    device_id=device.id,
                    user_id=identity.user_id,
                )
                return device

            reassigned = device.model_copy(
                update={
                    "user_id": identity.user_id,
                    "platform": platform,
                    "updated_at": self.clock(),
                }
            )
            saved = await self.device_repository.update(credential, reassigned)
            logfire.info(
                "Device reassigned",
                device_id=saved.id,
                previous_user_id=device.user_id,
                user_id=identity.user_id,
            )
            return saved

    async def unbind_device(self, identity: UserIdentity, push_token: PushToken) -> bool:
        """Delete the device record for a push token on sign-out.

        Only a record owned by the signing-out user is deleted; a record that
        was already reassigned to another account is left alone.

        Args:
            identity: User signing out
            push_token: Push token of this installation

        Returns:
            True if a record was deleted

        Raises:
            NotAuthenticatedError: If identity has no credential
            SyncFailure: If a store operation fails
        """
        credential = self._credential_for(identity)

        with logfire.span(
            "device_binding_service.unbind_device", user_id=identity.user_id
        ):
            device = await self.device_repository.find_by_token(credential, push_token)
            if device is None:
                logfire.info("No device to unbind", user_id=identity.user_id)
                return False

            if device.user_id != identity.user_id:
                logfire.warn(
                    "Device owned by another user, not deleting",
                    device_id=device.id,
                    owner_id=device.user_id,
                    user_id=identity.user_id,
                )
                return False

            await self.device_repository.delete(credential, device.id)
            logfire.info("Device unbound", device_id=device.id, user_id=identity.user_id)
            return True
