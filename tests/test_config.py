"""Tests for client configuration and credentials."""

import pytest

from scryfall_client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ApplicationSecret,
    ClientConfig,
    GrantSecret,
    ScryfallSettings,
    credential_from_secrets,
)
from scryfall_client.errors import ConfigurationError, MultipleSecretsError
from scryfall_client.rate_limit import RateLimiter


class TestCredentialFromSecrets:
    def test_no_secrets(self) -> None:
        assert credential_from_secrets() is None

    def test_empty_strings_are_unset(self) -> None:
        assert credential_from_secrets(client_secret="", grant_secret="") is None

    def test_client_secret(self) -> None:
        assert credential_from_secrets(client_secret="abc") == ApplicationSecret("abc")

    def test_grant_secret(self) -> None:
        assert credential_from_secrets(grant_secret="xyz") == GrantSecret("xyz")

    def test_both_secrets_rejected(self) -> None:
        """Application and grant secrets are mutually exclusive."""
        with pytest.raises(MultipleSecretsError, match="multiple secrets configured"):
            credential_from_secrets(client_secret="abc", grant_secret="xyz")

    def test_multiple_secrets_is_configuration_error(self) -> None:
        assert issubclass(MultipleSecretsError, ConfigurationError)


class TestCredentials:
    def test_bearer_authorization(self) -> None:
        assert ApplicationSecret("abc").authorization == "Bearer abc"
        assert GrantSecret("xyz").authorization == "Bearer xyz"

    def test_credentials_immutable(self) -> None:
        secret = GrantSecret("xyz")
        with pytest.raises(AttributeError):
            secret.token = "other"  # type: ignore[misc]


class TestClientConfig:
    """Tests for ClientConfig defaults and validation."""

    def test_defaults(self) -> None:
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.credential is None
        assert config.authorization is None
        assert config.http_client is None
        assert isinstance(config.rate_limiter, RateLimiter)
        assert config.rate_limiter.interval == pytest.approx(0.1)

    def test_user_agent_embeds_version(self) -> None:
        assert DEFAULT_USER_AGENT.startswith("scryfall-client/")

    def test_limiter_can_be_disabled(self) -> None:
        assert ClientConfig(rate_limiter=None).rate_limiter is None

    def test_each_config_owns_a_limiter(self) -> None:
        assert ClientConfig().rate_limiter is not ClientConfig().rate_limiter

    def test_authorization_from_credential(self) -> None:
        config = ClientConfig(credential=GrantSecret("xyz"))
        assert config.authorization == "Bearer xyz"

    @pytest.mark.parametrize(
        "base_url",
        ["not a url", "api.scryfall.com", "ftp://api.scryfall.com", "https://"],
    )
    def test_rejects_bad_base_url(self, base_url: str) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig(base_url=base_url)

    def test_rejects_unknown_credential(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported credential"):
            ClientConfig(credential="Bearer abc")  # type: ignore[arg-type]

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ConfigurationError, match="Timeout"):
            ClientConfig(timeout=0)

    def test_from_secrets(self) -> None:
        config = ClientConfig.from_secrets(client_secret="abc", user_agent="bot/1.0")
        assert config.credential == ApplicationSecret("abc")
        assert config.user_agent == "bot/1.0"

    def test_from_secrets_rejects_both(self) -> None:
        with pytest.raises(MultipleSecretsError):
            ClientConfig.from_secrets(client_secret="abc", grant_secret="xyz")


class TestFromSettings:
    """Tests for building a config from SCRYFALL_* environment variables."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRYFALL_BASE_URL", "https://scryfall.example.test")
        monkeypatch.setenv("SCRYFALL_USER_AGENT", "collector/3.1")
        monkeypatch.setenv("SCRYFALL_TIMEOUT", "5")
        monkeypatch.setenv("SCRYFALL_REQUESTS_PER_SECOND", "4")
        monkeypatch.setenv("SCRYFALL_GRANT_SECRET", "grant-xyz")
        monkeypatch.delenv("SCRYFALL_CLIENT_SECRET", raising=False)

        config = ClientConfig.from_settings(ScryfallSettings(_env_file=None))

        assert config.base_url == "https://scryfall.example.test"
        assert config.user_agent == "collector/3.1"
        assert config.timeout == 5.0
        assert config.credential == GrantSecret("grant-xyz")
        assert config.rate_limiter is not None
        assert config.rate_limiter.interval == pytest.approx(0.25)

    def test_zero_rate_disables_limiter(self) -> None:
        settings = ScryfallSettings(_env_file=None, requests_per_second=0)
        assert ClientConfig.from_settings(settings).rate_limiter is None

    def test_both_secrets_in_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRYFALL_CLIENT_SECRET", "app-abc")
        monkeypatch.setenv("SCRYFALL_GRANT_SECRET", "grant-xyz")

        with pytest.raises(MultipleSecretsError):
            ClientConfig.from_settings(ScryfallSettings(_env_file=None))

    def test_defaults_without_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("BASE_URL", "USER_AGENT", "CLIENT_SECRET", "GRANT_SECRET"):
            monkeypatch.delenv(f"SCRYFALL_{name}", raising=False)

        config = ClientConfig.from_settings(ScryfallSettings(_env_file=None))

        assert config.base_url == DEFAULT_BASE_URL
        assert config.credential is None
