"""Error taxonomy for keybridge operations.

Every failure raised by the response pipeline belongs to exactly one
operation family (:class:`ListIdentitiesError` or :class:`SignError`) and one
generic kind (:class:`DispatchFailure`, :class:`ParseFailure` or
:class:`ServiceRejected`), so callers can catch by either axis.
"""

from __future__ import annotations


class KeybridgeError(Exception):
    """Base class for all keybridge errors."""


class DecodeError(ValueError):
    """Raised when text is not valid padded base64."""


class ConfigError(KeybridgeError):
    """Raised when configuration cannot be loaded."""


class DispatchFailure(KeybridgeError):
    """The HTTP layer failed to deliver the response body."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"HTTP dispatch failed: {self.cause}"


class ParseFailure(KeybridgeError):
    """The response body arrived but did not decode into the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ServiceRejected(KeybridgeError):
    """The signing service answered with an error status and message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code, message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"service rejected request ({self.status_code}): {self.message}"


class ListIdentitiesError(KeybridgeError):
    """Failure of a list-identities call."""


class ListIdentitiesDispatchFailure(ListIdentitiesError, DispatchFailure):
    pass


class ListIdentitiesParseFailure(ListIdentitiesError, ParseFailure):
    pass


class ListIdentitiesRejected(ListIdentitiesError, ServiceRejected):
    pass


class SignError(KeybridgeError):
    """Failure of a sign call."""


class SignDispatchFailure(SignError, DispatchFailure):
    pass


class SignParseFailure(SignError, ParseFailure):
    pass


class SignRejected(SignError, ServiceRejected):
    pass


class UnknownKey(SignRejected):
    """The service holds no key matching the requested public key blob."""


def rejected_sign_error(status_code: int, message: str) -> SignRejected:
    """Pick the most specific sign rejection for ``status_code``."""
    if status_code == 404:
        return UnknownKey(status_code, message)
    return SignRejected(status_code, message)
