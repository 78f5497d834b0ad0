"""Validation and encoding guardrails."""

from __future__ import annotations

import hashlib
import re

from .errors import ConfigError

SUPPORTED_VERSIONS = ("v2", "v3")
UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9._-]")


def encode_component(value: str) -> str:
    """Percent-encode everything except ASCII alphanumerics, '.', '-' and '_'."""
    return UNSAFE_CHARACTERS.sub(
        lambda match: "".join(f"%{byte:02X}" for byte in match.group(0).encode("utf-8")),
        value,
    )


def clean_option(value: str | None) -> str | None:
    """Strip a selector option and treat blank values as absent."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def md5_hex(email: str) -> str:
    """Return the MD5 hex digest used for hash lookups."""
    return hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()


def sha1_hex(email: str) -> str:
    """Return the SHA1 hex digest used for hash lookups."""
    return hashlib.sha1(email.strip().lower().encode("utf-8")).hexdigest()


def validate_client_config(
    *,
    api_key: str,
    host: str,
    port: int,
    version: str,
    timeout: float,
) -> None:
    """Validate client configuration and raise ConfigError on invalid values."""
    if not isinstance(api_key, str) or not api_key.strip():
        raise ConfigError("An API key is required (--api-key or RAPLEAF_API_KEY).")
    if not isinstance(host, str) or not host.strip():
        raise ConfigError("--host must be a non-empty string.")
    if isinstance(port, bool) or not isinstance(port, int) or not 1 <= port <= 65535:
        raise ConfigError("--port must be an integer between 1 and 65535.")
    if version not in SUPPORTED_VERSIONS:
        raise ConfigError(
            f"Unsupported API version {version!r}; expected one of {', '.join(SUPPORTED_VERSIONS)}."
        )
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("--timeout must be a number > 0.")
