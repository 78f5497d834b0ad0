"""Exceptions raised by the Rapleaf client."""

from __future__ import annotations


class RapleafError(Exception):
    """Base exception for this project."""


class ConfigError(RapleafError):
    """Raised when client configuration is invalid."""


class SelectorError(RapleafError):
    """Raised when the lookup selector is missing, ambiguous, or unsupported."""


class TransportError(RapleafError):
    """Raised when the HTTP request itself fails."""


class ResponseParseError(RapleafError):
    """Raised when a successful response body cannot be parsed."""


class ServiceError(RapleafError):
    """Raised for any non-200 response from the person endpoint."""

    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class PersonAccepted(ServiceError):
    """The lookup was accepted and is still running on the server (202)."""


class InvalidEmail(ServiceError):
    """The server rejected the email address (400)."""


class AuthFailure(ServiceError):
    """Missing or invalid API key (401)."""


class QueryLimitExceeded(ServiceError):
    """The API key ran out of queries (403)."""


class EmailHashNotFound(ServiceError):
    """Unknown email or hash (404)."""


class InternalServerError(ServiceError):
    """Unexpected server failure (500)."""
