from __future__ import annotations

from pathlib import Path

import pytest

from api.core import config as core_config


@pytest.fixture()
def fresh_settings(monkeypatch):
    """Limpa o cache de settings antes e depois de cada teste."""
    for name in ("APP_ENV", "RECORDS_FILE", "SHARED_SECRET", "AUTH_HEADER", "LOG_LEVEL", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield core_config.get_settings
    core_config.get_settings.cache_clear()


def test_defaults(fresh_settings):
    settings = fresh_settings()

    assert settings.app_env == "dev"
    assert settings.records_file == core_config.DEFAULT_RECORDS_FILE
    assert settings.records_file.name == "user.json"
    assert settings.shared_secret == "robel"
    assert settings.auth_header == "Authorization"
    assert settings.log_level == "INFO"
    assert settings.port == 8080


def test_environment_overrides(fresh_settings, monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("RECORDS_FILE", str(tmp_path / "people.json"))
    monkeypatch.setenv("SHARED_SECRET", "abc")
    monkeypatch.setenv("AUTH_HEADER", "X-Api-Key")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "9000")

    settings = fresh_settings()

    assert settings.app_env == "prod"
    assert settings.records_file == Path(tmp_path / "people.json")
    assert settings.shared_secret == "abc"
    assert settings.auth_header == "X-Api-Key"
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000


def test_invalid_port_falls_back_to_default(fresh_settings, monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    assert fresh_settings().port == 8080


def test_settings_are_cached(fresh_settings):
    assert fresh_settings() is fresh_settings()
