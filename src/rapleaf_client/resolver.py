"""Selector resolution and versioned request URL construction."""

from __future__ import annotations

from .config import ClientConfig
from .errors import ConfigError, SelectorError
from .models import EmailSelector, Md5Selector, Selector, Sha1Selector, SiteProfileSelector
from .validation import SUPPORTED_VERSIONS, clean_option, encode_component


def selector_from_options(
    *,
    email: str | None = None,
    md5: str | None = None,
    sha1: str | None = None,
    site: str | None = None,
    profile: str | None = None,
) -> Selector:
    """Build exactly one selector from optional lookup keys."""
    email, md5, sha1 = clean_option(email), clean_option(md5), clean_option(sha1)
    site, profile = clean_option(site), clean_option(profile)

    if (site is None) != (profile is None):
        raise SelectorError("Both site and profile must be provided for a profile lookup.")

    candidates: list[Selector] = []
    if email is not None:
        candidates.append(EmailSelector(email))
    if md5 is not None:
        candidates.append(Md5Selector(md5))
    if sha1 is not None:
        candidates.append(Sha1Selector(sha1))
    if site is not None and profile is not None:
        candidates.append(SiteProfileSelector(site, profile))

    if not candidates:
        raise SelectorError("An email, hash, or site and profile must be provided.")
    if len(candidates) > 1:
        raise SelectorError("Please provide only one of email, md5, sha1, or site and profile.")
    return candidates[0]


def _v2_path(selector: Selector) -> str:
    if isinstance(selector, EmailSelector):
        return f"/v2/person/{encode_component(selector.email)}"
    if isinstance(selector, (Md5Selector, Sha1Selector)):
        return f"/v2/person/{encode_component(selector.digest)}"
    raise SelectorError("API version v2 supports only email, md5, or sha1 lookups.")


def _v3_path(selector: Selector) -> str:
    if isinstance(selector, EmailSelector):
        return f"/v3/person/email/{encode_component(selector.email)}"
    if isinstance(selector, Md5Selector):
        return f"/v3/person/hash/md5/{encode_component(selector.digest)}"
    if isinstance(selector, Sha1Selector):
        return f"/v3/person/hash/sha1/{encode_component(selector.digest)}"
    return (
        f"/v3/person/web/{encode_component(selector.site)}"
        f"/{encode_component(selector.profile)}"
    )


def person_path(selector: Selector, version: str) -> str:
    """Return the request path for a selector under an API version."""
    if version == "v2":
        return _v2_path(selector)
    if version == "v3":
        return _v3_path(selector)
    raise ConfigError(
        f"Unsupported API version {version!r}; expected one of {', '.join(SUPPORTED_VERSIONS)}."
    )


def person_url(config: ClientConfig, selector: Selector) -> str:
    """Return the full person lookup URL including the API key."""
    path = person_path(selector, config.version)
    return f"http://{config.host}:{config.port}{path}?api_key={encode_component(config.api_key)}"


def redact_url(url: str) -> str:
    """Hide the API key in a URL before it is logged."""
    base, _, _ = url.partition("?api_key=")
    return f"{base}?api_key=***"
