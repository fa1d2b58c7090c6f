"""Testes das settings base e LivePerson."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from config.settings import (
    DEFAULT_CSDS_DOMAIN,
    BaseSettings,
    LivePersonSettings,
    get_base_settings,
    get_liveperson_settings,
)
from config.settings.base.core import _parse_environment

FULL = LivePersonSettings(
    account_id="123",
    installation_id="inst",
    secret="s",
    port=8080,
    oauth_consumer_key="ck",
    oauth_consumer_secret="cs",
    oauth_token="tk",
    oauth_token_secret="ts",
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_base_settings.cache_clear()
    get_liveperson_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_liveperson_settings.cache_clear()


class TestBaseSettings:
    def test_default_values(self) -> None:
        settings = BaseSettings()
        assert settings.environment == "development"
        assert settings.service_name == "lp-consumer-connector"
        assert settings.validate() == []

    def test_immutable(self) -> None:
        with pytest.raises(FrozenInstanceError):
            BaseSettings().debug = True  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("anything", "development")],
    )
    def test_parse_environment(self, raw: str, expected: str) -> None:
        assert _parse_environment(raw) == expected

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DEBUG", "true")
        settings = get_base_settings()
        assert settings.is_production
        assert settings.log_level == "DEBUG"
        assert settings.debug is True
        assert get_base_settings() is settings


class TestLivePersonSettings:
    def test_defaults_disable_every_capability(self) -> None:
        settings = LivePersonSettings()
        assert settings.csds_domain == DEFAULT_CSDS_DOMAIN
        assert settings.can_resolve_domains is False
        assert settings.can_send is False
        assert settings.can_listen is False
        assert settings.oauth_params is None
        assert len(settings.validate()) == 4

    def test_full_configuration_has_no_warnings(self) -> None:
        assert FULL.validate() == []
        assert FULL.oauth_params == {
            "consumer_key": "ck",
            "consumer_secret": "cs",
            "token": "tk",
            "token_secret": "ts",
        }

    def test_partial_oauth_is_unavailable(self) -> None:
        settings = LivePersonSettings(oauth_consumer_key="ck", oauth_token="tk")
        assert settings.oauth_params is None

    def test_invalid_timeout_is_reported(self) -> None:
        settings = LivePersonSettings(
            account_id="123",
            installation_id="inst",
            secret="s",
            port=8080,
            oauth_consumer_key="ck",
            oauth_consumer_secret="cs",
            oauth_token="tk",
            oauth_token_secret="ts",
            request_timeout_seconds=0,
        )
        assert settings.validate() == ["LP_REQUEST_TIMEOUT_SECONDS deve ser > 0"]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LP_ACCOUNT_ID", "987")
        monkeypatch.setenv("LP_CSDS_DOMAIN", "adminlogin.example.net")
        monkeypatch.setenv("LP_INSTALLATION_ID", "inst")
        monkeypatch.setenv("LP_SECRET", "s")
        monkeypatch.setenv("LP_APP_ID", "my-app")
        monkeypatch.setenv("LP_PORT", "8081")
        monkeypatch.setenv("LP_PUBLIC_URL", "https://tunnel.example.net")

        settings = get_liveperson_settings()

        assert settings.account_id == "987"
        assert settings.csds_domain == "adminlogin.example.net"
        assert settings.app_id == "my-app"
        assert settings.port == 8081
        assert settings.public_url == "https://tunnel.example.net"
        assert settings.can_send is True
        assert settings.can_listen is True

    def test_empty_port_means_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LP_PORT", "")
        assert get_liveperson_settings().port == 0


@pytest.mark.parametrize(
    ("environment", "log_format", "expected"),
    [
        ("development", "text", "text"),
        ("development", "json", "json"),
        ("production", "text", "json"),
        ("staging", "yaml", "json"),
    ],
)
def test_effective_log_format(environment: str, log_format: str, expected: str) -> None:
    settings = BaseSettings(environment=environment, log_format=log_format)  # type: ignore[arg-type]
    assert settings.effective_log_format == expected


def test_invalid_log_format_is_reported() -> None:
    assert BaseSettings(log_format="yaml").validate() == ["LOG_FORMAT inválido: yaml"]
