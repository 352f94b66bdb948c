"""Host binding domain service."""

from abc import ABC, abstractmethod

import logfire

from partyparty.domain.error import ValidationError
from partyparty.domain.model.host import Host
from partyparty.domain.model.user_identity import UserIdentity
from partyparty.domain.repository import HostRepository

from .base import Service


class HostLookup(ABC):
    """One step of the host lookup fallback chain."""

    name: str

    @abstractmethod
    async def find(
        self, repository: HostRepository, credential: str, identity: UserIdentity
    ) -> Host | None:
        """Return the matching host, or None to fall through to the next step."""
        pass


class HostByOwnerLookup(HostLookup):
    """Host already owned by the signed-in user."""

    name = "owner"

    async def find(
        self, repository: HostRepository, credential: str, identity: UserIdentity
    ) -> Host | None:
        return await repository.find_by_user_id(credential, identity.user_id)


class HostByEmailLookup(HostLookup):
    """Host created before its owner had an account, claimed by exact email."""

    name = "email"

    async def find(
        self, repository: HostRepository, credential: str, identity: UserIdentity
    ) -> Host | None:
        if not identity.email:
            return None
        return await repository.find_by_email(credential, identity.email)


# Tried in order; the first match wins
HOST_LOOKUP_ORDER: tuple[HostLookup, ...] = (HostByOwnerLookup(), HostByEmailLookup())


class HostBindingService(Service):
    """Keeps one host record per email, owned by the signed-in user."""

    def __init__(
        self,
        host_repository: HostRepository,
        lookup_order: tuple[HostLookup, ...] = HOST_LOOKUP_ORDER,
    ) -> None:
        """Initialize host binding service.

        Args:
            host_repository: Host repository
            lookup_order: Lookup strategies tried in sequence
        """
        self.host_repository = host_repository
        self.lookup_order = lookup_order

    async def find_host(self, identity: UserIdentity) -> Host | None:
        """Find the host for an identity through the lookup chain.

        Args:
            identity: Signed-in user

        Returns:
            First host matched by the chain, None if no step matches

        Raises:
            NotAuthenticatedError: If identity has no credential
            SyncFailure: If a lookup fails
        """
        credential = self._credential_for(identity)

        for lookup in self.lookup_order:
            host = await lookup.find(self.host_repository, credential, identity)
            if host is not None:
                logfire.info(
                    "Host matched",
                    host_id=host.id,
                    lookup=lookup.name,
                    user_id=identity.user_id,
                )
                return host
        return None

    async def bind_host(
        self, identity: UserIdentity, display_name: str | None = None
    ) -> Host | None:
        """Link the host profile to the signed-in user.

        A host found by owner or by email is updated when its owner, email or
        (if supplied) name differ from the identity; otherwise nothing is
        written. When no host is found, one is created if a display name is
        supplied (sign-up); without one (plain sign-in) None is returned.

        Args:
            identity: Signed-in user, must carry an email
            display_name: Profile name to store, if known

        Returns:
            The bound host, or None when there is nothing to bind

        Raises:
            NotAuthenticatedError: If identity has no credential
            ValidationError: If identity has no email or the name is blank
            SyncFailure: If a store operation fails
        """
        credential = self._credential_for(identity)
        if not identity.email:
            raise ValidationError("Host binding requires an email address")
        if display_name is not None and not display_name.strip():
            raise ValidationError("Host name must not be empty")

        with logfire.span(
            "host_binding_service.bind_host",
            user_id=identity.user_id,
            has_display_name=display_name is not None,
        ):
            host = await self.find_host(identity)

            if host is None:
                if display_name is None:
                    logfire.info("No host to bind", user_id=identity.user_id)
                    return None

                created = await self.host_repository.create(
                    credential,
                    user_id=identity.user_id,
                    email=identity.email,
                    name=display_name,
                )
                logfire.info(
                    "Host created", host_id=created.id, user_id=identity.user_id
                )
                return created

            name = display_name if display_name is not None else host.name
            if (
                host.user_id == identity.user_id
                and host.email == identity.email
                and host.name == name
            ):
                logfire.info("Host already bound", host_id=host.id)
                return host

            linked = host.model_copy(
                update={
                    "user_id": identity.user_id,
                    "email": identity.email,
                    "name": name,
                }
            )
            saved = await self.host_repository.update(credential, linked)
            logfire.info(
                "Host linked",
                host_id=saved.id,
                previous_user_id=host.user_id,
                user_id=identity.user_id,
            )
            return saved
