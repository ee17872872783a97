import logging
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic_settings import BaseSettings, SettingsConfigDict

from scryfall_client.errors import ConfigurationError, MultipleSecretsError
from scryfall_client.rate_limit import RateLimiter

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# =============================================================================
# CLIENT DEFAULTS
# =============================================================================

DEFAULT_BASE_URL = "https://api.scryfall.com"

DEFAULT_USER_AGENT = f"scryfall-client/{VERSION}"

# Total time allowed for one HTTP round trip, in seconds
DEFAULT_TIMEOUT = 30.0

# Scryfall asks for no more than 10 requests per second
DEFAULT_REQUESTS_PER_SECOND = 10


# =============================================================================
# CREDENTIALS
# =============================================================================


@dataclass(frozen=True, slots=True)
class ApplicationSecret:
    """Authenticates requests as the application owning the client secret."""

    token: str

    @property
    def authorization(self) -> str:
        return f"Bearer {self.token}"


@dataclass(frozen=True, slots=True)
class GrantSecret:
    """Authenticates requests with the rights of an OAuth grant account."""

    token: str

    @property
    def authorization(self) -> str:
        return f"Bearer {self.token}"


Credential = ApplicationSecret | GrantSecret | None


def credential_from_secrets(
    client_secret: str | None = None,
    grant_secret: str | None = None,
) -> Credential:
    """
    Build a credential from two optional raw secrets.

    Empty strings count as unset.

    Raises:
        MultipleSecretsError: If both secrets are set
    """
    if client_secret and grant_secret:
        raise MultipleSecretsError()
    if grant_secret:
        return GrantSecret(grant_secret)
    if client_secret:
        return ApplicationSecret(client_secret)
    return None


# =============================================================================
# ENVIRONMENT SETTINGS
# =============================================================================


class ScryfallSettings(BaseSettings):
    """Client settings loaded from SCRYFALL_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="SCRYFALL_", env_file=".env", extra="ignore")

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT

    # 0 disables client-side rate limiting
    requests_per_second: float = DEFAULT_REQUESTS_PER_SECOND

    client_secret: str = ""
    grant_secret: str = ""


# =============================================================================
# CLIENT CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class ClientConfig:
    """
    Validated configuration for a ScryfallClient.

    Attributes:
        base_url: Absolute URL that request paths are resolved against
        user_agent: Sent as the User-Agent header on every request
        credential: Optional bearer credential (application or grant)
        timeout: Total time allowed per HTTP round trip, in seconds
        http_client: Caller-owned httpx client; one is created when None
        rate_limiter: Admission control for requests; None disables it
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    credential: Credential = None
    timeout: float = DEFAULT_TIMEOUT
    http_client: httpx.AsyncClient | None = None
    rate_limiter: RateLimiter | None = field(default_factory=RateLimiter)

    def __post_init__(self) -> None:
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid base URL {self.base_url!r}: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(
                f"Base URL must be an absolute http(s) URL, got {self.base_url!r}"
            )
        if self.credential is not None and not isinstance(
            self.credential, ApplicationSecret | GrantSecret
        ):
            raise ConfigurationError(f"Unsupported credential: {type(self.credential).__name__}")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")

    @property
    def authorization(self) -> str | None:
        """Value for the Authorization header, if a credential is set."""
        if self.credential is None:
            return None
        return self.credential.authorization

    @classmethod
    def from_secrets(
        cls,
        client_secret: str | None = None,
        grant_secret: str | None = None,
        **kwargs: Any,
    ) -> "ClientConfig":
        """
        Build a config from raw secrets plus any other config fields.

        Raises:
            MultipleSecretsError: If both secrets are set
        """
        return cls(credential=credential_from_secrets(client_secret, grant_secret), **kwargs)

    @classmethod
    def from_settings(cls, settings: ScryfallSettings | None = None) -> "ClientConfig":
        """
        Build a config from environment settings.

        Raises:
            MultipleSecretsError: If both SCRYFALL_CLIENT_SECRET and
                SCRYFALL_GRANT_SECRET are set
        """
        if settings is None:
            settings = ScryfallSettings()

        rate_limiter = None
        if settings.requests_per_second > 0:
            rate_limiter = RateLimiter(rate=settings.requests_per_second)
        else:
            logger.info("Client-side rate limiting disabled by settings")

        return cls.from_secrets(
            client_secret=settings.client_secret,
            grant_secret=settings.grant_secret,
            base_url=settings.base_url,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            rate_limiter=rate_limiter,
        )
