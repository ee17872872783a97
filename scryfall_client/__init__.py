"""Async client for the Scryfall Magic: The Gathering API."""

from scryfall_client.client import ScryfallClient
from scryfall_client.config import (
    VERSION,
    ApplicationSecret,
    ClientConfig,
    Credential,
    GrantSecret,
    ScryfallSettings,
    credential_from_secrets,
)
from scryfall_client.errors import (
    ConfigurationError,
    ErrorDecodeError,
    MultipleSecretsError,
    ScryfallAPIError,
    ScryfallClientError,
    URLResolutionError,
)
from scryfall_client.models.common import ListEnvelope
from scryfall_client.rate_limit import RateLimiter
from scryfall_client.timestamps import ZERO_TIME, Date, Timestamp

__version__ = VERSION

__all__ = [
    "ApplicationSecret",
    "ClientConfig",
    "ConfigurationError",
    "Credential",
    "Date",
    "ErrorDecodeError",
    "GrantSecret",
    "ListEnvelope",
    "MultipleSecretsError",
    "RateLimiter",
    "ScryfallAPIError",
    "ScryfallClient",
    "ScryfallClientError",
    "ScryfallSettings",
    "Timestamp",
    "URLResolutionError",
    "ZERO_TIME",
    "credential_from_secrets",
]
