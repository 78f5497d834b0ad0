import logging
from typing import Any

import pytest
import requests

from rapleaf_client.client import RapleafClient, make_session, map_response, preview_body
from rapleaf_client.config import ClientConfig
from rapleaf_client.errors import (
    AuthFailure,
    ConfigError,
    EmailHashNotFound,
    InternalServerError,
    InvalidEmail,
    PersonAccepted,
    QueryLimitExceeded,
    SelectorError,
    ServiceError,
    TransportError,
)
from rapleaf_client.models import SiteProfileSelector

PERSON_XML = '<person id="abc123"><basics><name>Dummy Person</name><age>42</age></basics></person>'


class FakeResponse:
    def __init__(self, *, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeSession:
    def __init__(self, response: FakeResponse | None = None, raise_error: bool = False) -> None:
        self._response = response or FakeResponse(status_code=500)
        self._raise_error = raise_error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        if self._raise_error:
            raise requests.ConnectionError("network down")
        return self._response


def make_client(session: FakeSession, **overrides: Any) -> RapleafClient:
    values: dict[str, Any] = {"api_key": "key", "host": "api.example.com", "port": 80}
    values.update(overrides)
    return RapleafClient(
        ClientConfig(**values), session=session, logger=logging.getLogger("test")
    )


def test_person_success_returns_parsed_record() -> None:
    session = FakeSession(FakeResponse(text=PERSON_XML))
    person = make_client(session, timeout=3.0).person(email="dummy+x@rapleaf.com")
    assert person["id"] == "abc123"
    assert person["basics.name"] == "Dummy Person"
    assert person["basics.age"] == "42"
    assert session.calls == [
        (
            "http://api.example.com:80/v3/person/email/dummy%2Bx%40rapleaf.com?api_key=key",
            {"timeout": 3.0},
        )
    ]


def test_person_accepts_selector_objects() -> None:
    session = FakeSession(FakeResponse(text=PERSON_XML))
    make_client(session).person(SiteProfileSelector("twitter.com", "dummy"))
    assert session.calls[0][0] == "http://api.example.com:80/v3/person/web/twitter.com/dummy?api_key=key"


def test_person_rejects_selector_and_options_together() -> None:
    session = FakeSession(FakeResponse(text=PERSON_XML))
    with pytest.raises(TypeError):
        make_client(session).person(SiteProfileSelector("twitter.com", "dummy"), email="a@b.com")
    assert session.calls == []


@pytest.mark.parametrize(
    "options",
    [{}, {"email": "a@b.com", "sha1": "abc"}],
)
def test_person_validates_selector_before_request(options: dict) -> None:
    session = FakeSession(FakeResponse(text=PERSON_XML))
    with pytest.raises(SelectorError):
        make_client(session).person(**options)
    assert session.calls == []


def test_v2_site_profile_fails_without_request() -> None:
    session = FakeSession(FakeResponse(text=PERSON_XML))
    client = make_client(session, version="v2")
    with pytest.raises(SelectorError):
        client.person(email=None, site="twitter.com", profile="dummy")
    assert session.calls == []


def test_v2_hash_lookup_url() -> None:
    session = FakeSession(FakeResponse(text=PERSON_XML))
    make_client(session, version="v2").person(md5="5376a4b69a80080cc2fa39e143490fc0")
    assert (
        session.calls[0][0]
        == "http://api.example.com:80/v2/person/5376a4b69a80080cc2fa39e143490fc0?api_key=key"
    )


def test_unknown_version_fails_at_construction() -> None:
    with pytest.raises(ConfigError):
        make_client(FakeSession(), version="v1")


@pytest.mark.parametrize(
    ("status_code", "error_cls"),
    [
        (202, PersonAccepted),
        (400, InvalidEmail),
        (401, AuthFailure),
        (403, QueryLimitExceeded),
        (404, EmailHashNotFound),
        (500, InternalServerError),
    ],
)
def test_status_table(status_code: int, error_cls: type[ServiceError]) -> None:
    session = FakeSession(FakeResponse(status_code=status_code, text="nope"))
    with pytest.raises(error_cls) as excinfo:
        make_client(session).person(email="dummy@rapleaf.com")
    assert excinfo.value.status_code == status_code
    assert excinfo.value.body == "nope"


def test_not_found_message() -> None:
    with pytest.raises(EmailHashNotFound, match="consider supplying the unhashed email"):
        map_response(404, "")


def test_unknown_status_truncates_body() -> None:
    body = "x" * 80
    with pytest.raises(ServiceError) as excinfo:
        map_response(418, body)
    assert type(excinfo.value) is ServiceError
    assert str(excinfo.value) == f"Unknown error (HTTP 418): {'x' * 50}..."


def test_preview_body_leaves_short_bodies_alone() -> None:
    assert preview_body("short") == "short"
    assert preview_body("y" * 50) == "y" * 50


def test_transport_errors_are_wrapped() -> None:
    session = FakeSession(raise_error=True)
    with pytest.raises(TransportError):
        make_client(session).person(email="dummy@rapleaf.com")


def test_request_is_logged_without_api_key(caplog: pytest.LogCaptureFixture) -> None:
    session = FakeSession(FakeResponse(status_code=404))
    with caplog.at_level(logging.DEBUG, logger="test"):
        with pytest.raises(EmailHashNotFound):
            make_client(session).person(email="dummy@rapleaf.com")
    assert "api_key=***" in caplog.text
    assert "api_key=key" not in caplog.text


def test_make_session_sets_user_agent() -> None:
    session = make_session("my-agent")
    assert session.headers["User-Agent"] == "my-agent"
