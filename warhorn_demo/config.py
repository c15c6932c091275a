"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_env: Literal["development", "production", "test"] = "development"
    app_secret_key: str

    @field_validator("app_secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Ensure secret key is strong enough."""
        if len(v) < 32:
            raise ValueError("APP_SECRET_KEY must be at least 32 characters long")
        if v == "change-me-to-a-secure-random-string":
            raise ValueError("APP_SECRET_KEY must be changed from the default value")
        return v

    app_url: str = "http://localhost:8080"
    app_name: str = "Warhorn OAuth Demo"

    # Warhorn OAuth
    warhorn_client_id: str
    warhorn_client_secret: str = ""
    # Must exactly match the redirect URI registered with the provider
    warhorn_redirect_uri: str = ""

    provider_name: str = "Warhorn"
    warhorn_authorize_url: str = "https://warhorn.net/oauth/authorize"
    warhorn_token_url: str = "https://warhorn.net/oauth/token"
    warhorn_graphql_url: str = "https://warhorn.net/graphql"

    oauth_scope: str = "openid email profile"
    oauth_state: str = "stateystate"

    # Where the client application reaches the token exchange function
    exchange_token_url: str = ""

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def redirect_uri(self) -> str:
        """Canonical OAuth redirect URI (falls back to the app URL)."""
        return self.warhorn_redirect_uri or self.app_url

    @property
    def token_exchange_endpoint(self) -> str:
        """URL of the token exchange function."""
        return self.exchange_token_url or f"{self.app_url.rstrip('/')}/exchange_token"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]
