"""Rapleaf person API client."""

from __future__ import annotations

import logging

from requests import Session
from requests.exceptions import RequestException

from .config import ClientConfig
from .errors import (
    AuthFailure,
    EmailHashNotFound,
    InternalServerError,
    InvalidEmail,
    PersonAccepted,
    QueryLimitExceeded,
    ServiceError,
    TransportError,
)
from .logging_utils import get_logger
from .models import HttpSession, Selector
from .person import Person, parse_person_xml
from .resolver import person_url, redact_url, selector_from_options

BODY_PREVIEW_LENGTH = 50

STATUS_ERRORS: dict[int, tuple[type[ServiceError], str]] = {
    202: (
        PersonAccepted,
        "This person is currently being searched. Check back shortly and we should have data.",
    ),
    400: (InvalidEmail, "Invalid email address."),
    401: (AuthFailure, "API key was not provided or is invalid."),
    403: (
        QueryLimitExceeded,
        "Your query limit has been exceeded. Contact developer@rapleaf.com "
        "if you would like to increase your limit.",
    ),
    404: (
        EmailHashNotFound,
        "We do not have this email in our system and are not able to create a person "
        "using a hash. If you would like better results, consider supplying the "
        "unhashed email address.",
    ),
    500: (
        InternalServerError,
        "There was an unexpected error on our server. This should be very rare and "
        "if you see it please contact developer@rapleaf.com.",
    ),
}


def make_session(user_agent: str) -> Session:
    """Create a requests session that identifies this client."""
    session = Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def preview_body(body: str) -> str:
    """Truncate a response body for error messages."""
    if len(body) <= BODY_PREVIEW_LENGTH:
        return body
    return body[:BODY_PREVIEW_LENGTH] + "..."


def map_response(status_code: int, body: str) -> Person:
    """Return a Person for a 200 response or raise the matching ServiceError."""
    if status_code == 200:
        return parse_person_xml(body)
    known = STATUS_ERRORS.get(status_code)
    if known is not None:
        error_cls, message = known
        raise error_cls(message, status_code=status_code, body=body)
    raise ServiceError(
        f"Unknown error (HTTP {status_code}): {preview_body(body)}",
        status_code=status_code,
        body=body,
    )


class RapleafClient:
    """Synchronous wrapper around the person lookup endpoint."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: HttpSession | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._session = session if session is not None else make_session(config.user_agent)
        self._logger = logger or get_logger()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def person_url(
        self,
        selector: Selector | None = None,
        *,
        email: str | None = None,
        md5: str | None = None,
        sha1: str | None = None,
        site: str | None = None,
        profile: str | None = None,
    ) -> str:
        """Resolve a selector, or the keyword options, into the request URL."""
        if selector is None:
            selector = selector_from_options(
                email=email, md5=md5, sha1=sha1, site=site, profile=profile
            )
        elif any(value is not None for value in (email, md5, sha1, site, profile)):
            raise TypeError("Pass either a selector or keyword options, not both.")
        return person_url(self._config, selector)

    def person(
        self,
        selector: Selector | None = None,
        *,
        email: str | None = None,
        md5: str | None = None,
        sha1: str | None = None,
        site: str | None = None,
        profile: str | None = None,
    ) -> Person:
        """Look up one person.

        Examples::

            client.person(email="dummy@rapleaf.com")
            client.person(md5=md5_hex("dummy@rapleaf.com"))
            client.person(SiteProfileSelector("twitter.com", "dummy"))

        Raises SelectorError or ConfigError before any request is sent,
        TransportError when the request fails, and a ServiceError subclass for
        every non-200 response.
        """
        url = self.person_url(
            selector, email=email, md5=md5, sha1=sha1, site=site, profile=profile
        )
        self._logger.debug("GET %s", redact_url(url))
        try:
            response = self._session.get(url, timeout=self._config.timeout)
        except RequestException as exc:
            raise TransportError(f"Person lookup request failed: {exc}") from exc

        if response.status_code != 200:
            self._logger.debug(
                "Person lookup returned HTTP %s for %s", response.status_code, redact_url(url)
            )
        return map_response(response.status_code, str(response.text))
