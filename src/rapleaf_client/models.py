"""Protocols and lightweight model types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Union


class HttpResponse(Protocol):
    """The slice of requests.Response the client reads."""

    status_code: int
    text: str


class HttpSession(Protocol):
    """Contract for the HTTP session used by the client."""

    def get(self, url: str, **kwargs: Any) -> HttpResponse:
        """Issue a GET request."""


@dataclass(frozen=True)
class EmailSelector:
    """Look a person up by plaintext email address."""

    email: str


@dataclass(frozen=True)
class Md5Selector:
    """Look a person up by the MD5 hex digest of their email."""

    digest: str


@dataclass(frozen=True)
class Sha1Selector:
    """Look a person up by the SHA1 hex digest of their email."""

    digest: str


@dataclass(frozen=True)
class SiteProfileSelector:
    """Look a person up by a social site and profile identifier."""

    site: str
    profile: str


Selector = Union[EmailSelector, Md5Selector, Sha1Selector, SiteProfileSelector]
