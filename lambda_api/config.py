"""Configuration management using Pydantic Settings."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Only load .env file in development (not Lambda/production)
        env_file=".env" if os.getenv("AWS_EXECUTION_ENV") is None else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Configuration
    log_level: str = "INFO"
    api_title: str = "lambda-api"
    commit_hash: str | None = None

    # Cookie Configuration
    cookie_max_age_seconds: int = 60 * 60 * 24 * 365  # One year
    cookie_secure: bool = True
    cookie_http_only: bool = True
    cookie_same_site: str = "Strict"

    # Local development server
    local_host: str = "127.0.0.1"
    local_port: int = 3000

    @field_validator("commit_hash", mode="before")
    @classmethod
    def convert_empty_string_to_none(cls, v):
        """Treat an empty COMMIT_HASH as unset."""
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    @field_validator("cookie_same_site")
    @classmethod
    def validate_same_site(cls, v: str) -> str:
        """Normalize SameSite to one of Strict, Lax or None."""
        normalized = v.strip().capitalize()
        if normalized not in ("Strict", "Lax", "None"):
            raise ValueError(f"cookie_same_site must be Strict, Lax or None, got {v!r}")
        return normalized


# Global settings instance
settings = Settings()
