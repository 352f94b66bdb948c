"""Unit tests for the guest use cases."""

import pytest

from partyparty.application.usecase.guest import (
    CreateGuestRequest,
    CreateGuestUseCase,
    ListGuestsRequest,
    ListGuestsUseCase,
    UpdateGuestRequest,
    UpdateGuestUseCase,
)
from partyparty.domain.error import NotFoundError, ValidationError
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGuestUseCases:
    """Tests for guest create, update and list."""

    @pytest.mark.asyncio
    async def test_create_update_list(self, unit_env):
        identity = make_identity()
        create = await unit_env.get(CreateGuestUseCase)
        update = await unit_env.get(UpdateGuestUseCase)
        list_guests = await unit_env.get(ListGuestsUseCase)

        created = await create.execute(
            CreateGuestRequest(
                identity=identity, name="Bob", email="bob@example.com", phone="5550100"
            )
        )
        await update.execute(
            UpdateGuestRequest(
                identity=identity,
                guest_id=created.guest.guest_id,
                name="Robert",
                email="bob@example.com",
                phone="5550100",
            )
        )
        response = await list_guests.execute(ListGuestsRequest(identity=identity))

        assert [g.name for g in response.guests] == ["Robert"]

    @pytest.mark.asyncio
    async def test_update_validates_before_lookup(self, unit_env):
        """Invalid contact details should fail before the guest is read."""
        update = await unit_env.get(UpdateGuestUseCase)

        with pytest.raises(ValidationError):
            await update.execute(
                UpdateGuestRequest(
                    identity=make_identity(),
                    guest_id="missing",
                    name="Bob",
                    email="bob@example.com",
                    phone="nope",
                )
            )

    @pytest.mark.asyncio
    async def test_update_missing_guest(self, unit_env):
        update = await unit_env.get(UpdateGuestUseCase)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateGuestRequest(
                    identity=make_identity(),
                    guest_id="missing",
                    name="Bob",
                    email="bob@example.com",
                    phone="5550100",
                )
            )
