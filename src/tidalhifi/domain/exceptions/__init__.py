"""Domain exceptions."""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    # Hey future me, message is kept as an attribute so callers can inspect it without
    # parsing str(exception). Never raise this directly - use a specific subclass so
    # callers can catch precisely.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class ConfigurationError(DomainException):
    """Client misconfiguration.

    Raised synchronously when the credentials handed to the client are
    missing or have the wrong type. Every credential field has its own
    message so the caller knows exactly which one is broken.

    Example:
        raise ConfigurationError("Username invalid or missing")
        raise ConfigurationError("Token invalid or missing")
    """

    pass


class AuthenticationError(DomainException):
    """Client is not authenticated.

    Raised before any network I/O when a read call is made without a
    session from a successful login().

    Example:
        raise AuthenticationError("You are not logged in, please use the login() method ...")
    """

    pass


class InvalidStateException(DomainException):
    """Raised when the client is in an invalid state for the requested operation."""

    pass


class LoginInProgressError(InvalidStateException):
    """Raised when login() is called while another login() is still awaiting TIDAL.

    Hey future me - two overlapping logins would race to write the session, so the
    second one is rejected instead of queued. Await the first call and then retry.
    """

    def __init__(
        self, message: str = "A login is already in progress for this client."
    ) -> None:
        super().__init__(message)


__all__ = [
    "DomainException",
    "ConfigurationError",
    "AuthenticationError",
    "InvalidStateException",
    "LoginInProgressError",
]
