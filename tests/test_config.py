"""Tests for environment-driven settings."""

import pytest

from trengo_fields.config import Settings, get_settings


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch):
    """Trengo values are loaded from their environment variables."""
    monkeypatch.setenv("TRENGO_SIGNING_SECRET", "secret")
    monkeypatch.setenv("TRENGO_TOKEN", "token")
    monkeypatch.setenv("TRENGO_LINK_FIELD_ID", "99")

    settings = Settings(_env_file=None)

    assert settings.trengo_signing_secret == "secret"
    assert settings.trengo_token == "token"
    assert settings.trengo_link_field_id == "99"


def test_settings_defaults_without_environment(monkeypatch: pytest.MonkeyPatch):
    """Missing values default to empty strings instead of failing at startup."""
    for name in ("TRENGO_SIGNING_SECRET", "TRENGO_TOKEN", "TRENGO_LINK_FIELD_ID", "TRENGO_API_BASE_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.trengo_token == ""
    assert settings.trengo_link_field_id == ""
    assert settings.trengo_api_base_url == "https://app.trengo.com/api/v2"


def test_get_settings_is_cached():
    """get_settings returns the same instance on every call."""
    assert get_settings() is get_settings()
