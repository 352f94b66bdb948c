"""Sign up use case."""

import logfire
from pydantic import BaseModel, Field

from partyparty.adapter.error import AdapterError
from partyparty.application.usecase.base import BaseUseCase
from partyparty.application.usecase.host.sync_host import HostItem
from partyparty.domain.error import DomainError
from partyparty.domain.model import UserIdentity
from partyparty.domain.service import AuthService, HostBindingService


class SignUpRequest(BaseModel):
    """Request to create or claim a host profile for a new account."""

    identity: UserIdentity
    name: str = Field(min_length=1, max_length=200)


class SignUpResponse(BaseModel):
    """Host profile bound to the new account."""

    host: HostItem


class SignUpUseCase(BaseUseCase[SignUpRequest, SignUpResponse]):
    """Use case for binding a host profile to a freshly created account.

    The account already exists at the identity provider when this runs. If
    the host cannot be bound, the account is deleted again so the user can
    retry sign-up from scratch.
    """

    def __init__(
        self, host_binding_service: HostBindingService, auth_service: AuthService
    ) -> None:
        """Initialize use case.

        Args:
            host_binding_service: Host binding domain service
            auth_service: Auth domain service, used for rollback
        """
        self.host_binding_service = host_binding_service
        self.auth_service = auth_service

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Bind the host profile, deleting the account on failure.

        Raises:
            ValidationError: If the identity has no email
            SyncFailure: If the host could not be stored (account rolled back)
        """
        identity = request.identity

        with logfire.span("sign_up", user_id=identity.user_id):
            try:
                host = await self.host_binding_service.bind_host(
                    identity, display_name=request.name
                )
            except DomainError as e:
                logfire.error(
                    "Host binding failed during sign-up, rolling back account",
                    user_id=identity.user_id,
                    error=str(e),
                )
                await self._rollback(identity)
                raise

            # A display name always yields a host
            assert host is not None
            return SignUpResponse(host=HostItem.from_host(host))

    async def _rollback(self, identity: UserIdentity) -> None:
        try:
            await self.auth_service.delete_account(identity)
        except (AdapterError, DomainError) as e:
            logfire.error(
                "Account rollback failed", user_id=identity.user_id, error=str(e)
            )
