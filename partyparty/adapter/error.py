"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class RecordStoreError(AdapterError):
    """A record store request failed (transport error or non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class RecordStoreAuthorizationError(RecordStoreError):
    """The record store rejected or was never sent a bearer credential."""

    pass


class IdentityProviderError(AdapterError):
    """The identity provider could not be reached or answered unexpectedly."""

    pass
