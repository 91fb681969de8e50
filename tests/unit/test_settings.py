"""Unit tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from myapp.config import DEFAULT_TEMPLATE_PATH, Settings

ENV_VARS = (
    "HOST",
    "PORT",
    "VERSION",
    "ENVIRONMENT",
    "DATABASE_URL",
    "API_SECRET_KEY",
    "LOG_LEVEL",
    "METRICS_ENABLED",
    "LANDING_TEMPLATE_PATH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults() -> None:
    settings = Settings.from_env()

    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.version == "1.0.0"
    assert settings.environment == "unknown"
    assert settings.database_configured is False
    assert settings.api_key_configured is False
    assert settings.metrics_enabled is True
    assert settings.landing_template_path == DEFAULT_TEMPLATE_PATH
    assert settings.secrets_summary() == {
        "database": "NOT CONFIGURED",
        "apiKey": "NOT CONFIGURED",
    }


def test_settings_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("VERSION", "3.1.0")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("DATABASE_URL", "postgres://db:5432/app")
    monkeypatch.setenv("API_SECRET_KEY", "key-from-secrets-manager")
    monkeypatch.setenv("METRICS_ENABLED", "false")
    monkeypatch.setenv("LANDING_TEMPLATE_PATH", "custom/index.html")

    settings = Settings.from_env()

    assert settings.port == 9090
    assert settings.version == "3.1.0"
    assert settings.environment == "production"
    assert settings.metrics_enabled is False
    assert settings.landing_template_path == Path("custom/index.html")
    assert settings.secrets_summary() == {"database": "connected", "apiKey": "configured"}


def test_empty_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "")
    monkeypatch.setenv("VERSION", "")
    monkeypatch.setenv("ENVIRONMENT", "  ")
    monkeypatch.setenv("API_SECRET_KEY", "")

    settings = Settings.from_env()

    assert settings.port == 8080
    assert settings.version == "1.0.0"
    assert settings.environment == "unknown"
    assert settings.api_key_configured is False


def test_invalid_port_fails_fast(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ValueError, match="PORT"):
        Settings.from_env()


def test_repr_hides_secret_values(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgres://user:hunter2@db/app")
    monkeypatch.setenv("API_SECRET_KEY", "super-secret")

    text = repr(Settings.from_env())

    assert "hunter2" not in text
    assert "super-secret" not in text


def test_settings_are_immutable() -> None:
    settings = Settings()

    with pytest.raises(AttributeError):
        settings.port = 1  # type: ignore[misc]
