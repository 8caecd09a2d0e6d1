"""Central error types used across the client."""

from __future__ import annotations


class NikePlusError(RuntimeError):
    """Base error for Nike+ client failures."""


class NikePlusAPIError(NikePlusError):
    """Raised when the remote service reports an application error.

    Both remote error shapes (the ``errorCode`` envelope and the bare
    ``{"error": ...}`` object) end up here; ``str(exc)`` is the remote message.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        result: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.result = result


class ResponseDecodeError(NikePlusError, ValueError):
    """Raised when a response body is not JSON or does not match the expected shape."""

    def __init__(self, message: str, *, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


class LoginError(NikePlusError):
    """Raised when the login redirect carries an ``error=`` marker."""

    def __init__(self, message: str, *, query: str = "") -> None:
        super().__init__(message)
        self.query = query


class TokenError(NikePlusError):
    """Raised when the token exchange response lacks a usable ``auth_token``."""


__all__ = [
    "NikePlusError",
    "NikePlusAPIError",
    "ResponseDecodeError",
    "LoginError",
    "TokenError",
]
