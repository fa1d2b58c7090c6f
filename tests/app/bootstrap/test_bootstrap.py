"""Testes do bootstrap: logging e validação de settings."""

from __future__ import annotations

import logging

import pytest

from app import bootstrap
from config.logging import CorrelationIdFilter
from config.settings import BaseSettings, LivePersonSettings


def test_initialize_app_configures_root_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        bootstrap,
        "get_base_settings",
        lambda: BaseSettings(log_level="WARNING", service_name="svc"),
    )

    bootstrap.initialize_app()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)


def test_initialize_test_app_uses_debug() -> None:
    bootstrap.initialize_test_app()
    assert logging.getLogger().level == logging.DEBUG


def test_validate_runtime_settings_never_raises(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: BaseSettings())
    monkeypatch.setattr(bootstrap, "get_liveperson_settings", lambda: LivePersonSettings())

    with caplog.at_level(logging.WARNING, logger="app.bootstrap"):
        warnings = bootstrap.validate_runtime_settings()

    assert len(warnings) == 4
    assert all(warning.startswith("liveperson: ") for warning in warnings)
    assert any(r.getMessage() == "settings_capabilities_degraded" for r in caplog.records)


def test_validate_runtime_settings_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: BaseSettings())
    monkeypatch.setattr(
        bootstrap,
        "get_liveperson_settings",
        lambda: LivePersonSettings(
            account_id="123",
            installation_id="inst",
            secret="s",
            port=8080,
            oauth_consumer_key="ck",
            oauth_consumer_secret="cs",
            oauth_token="tk",
            oauth_token_secret="ts",
        ),
    )
    assert bootstrap.validate_runtime_settings() == []
