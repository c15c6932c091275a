"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from warhorn_demo.config import Settings

SECRET = "x" * 40


def make_settings(**overrides) -> Settings:
    values = {
        "app_secret_key": SECRET,
        "warhorn_client_id": "client-id",
        "_env_file": None,
    }
    values.update(overrides)
    return Settings(**values)


class TestSettings:
    """Settings validation and derived values."""

    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(app_secret_key="too-short")

    def test_default_secret_key_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(app_secret_key="change-me-to-a-secure-random-string")

    def test_redirect_uri_defaults_to_app_url(self, monkeypatch):
        monkeypatch.delenv("WARHORN_REDIRECT_URI", raising=False)
        settings = make_settings(app_url="https://paizo.example.app")
        assert settings.redirect_uri == "https://paizo.example.app"

    def test_explicit_redirect_uri(self):
        settings = make_settings(warhorn_redirect_uri="https://registered.example/callback")
        assert settings.redirect_uri == "https://registered.example/callback"

    def test_token_exchange_endpoint(self, monkeypatch):
        monkeypatch.delenv("EXCHANGE_TOKEN_URL", raising=False)
        settings = make_settings(app_url="https://demo.example/")
        assert settings.token_exchange_endpoint == "https://demo.example/exchange_token"

    def test_explicit_token_exchange_endpoint(self):
        settings = make_settings(exchange_token_url="https://fn.example/.netlify/functions/exchange_token")
        assert settings.token_exchange_endpoint == "https://fn.example/.netlify/functions/exchange_token"

    def test_environment_flags(self):
        assert make_settings(app_env="production").is_production
        assert make_settings(app_env="development").is_development
        assert not make_settings(app_env="test").is_development
