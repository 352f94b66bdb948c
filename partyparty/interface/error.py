"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class InvalidAuthorizationHeaderError(InterfaceError):
    """Authorization header is missing or not a bearer credential."""

    pass
