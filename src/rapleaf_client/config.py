"""Client configuration model."""

from __future__ import annotations

from dataclasses import dataclass, field

from .validation import validate_client_config

DEFAULT_API_HOST = "api.rapleaf.com"
DEFAULT_API_PORT = 80
DEFAULT_API_VERSION = "v3"
DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "rapleaf-client/0.2.0 (python-requests)"


@dataclass(frozen=True)
class ClientConfig:
    """Validated, immutable settings for one Rapleaf client."""

    api_key: str = field(repr=False)
    host: str = DEFAULT_API_HOST
    port: int = DEFAULT_API_PORT
    version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        validate_client_config(
            api_key=self.api_key,
            host=self.host,
            port=self.port,
            version=self.version,
            timeout=self.timeout,
        )
