"""Configuration management for the rean_survey application.

All configuration is loaded from environment variables and/or .env file.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError

# Project root detection
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_FILE = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """
    Runtime configuration powered by environment variables and .env overrides.

    All settings can be configured via:
    1. Environment variables (highest priority)
    2. .env file in project root (loaded automatically)
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # -------------------------------------------------------------------------
    # Sharing
    # -------------------------------------------------------------------------
    public_base_url: str = Field(
        default="http://localhost:8501/",
        alias="PUBLIC_BASE_URL",
        description="Location that shared links point at.",
    )
    share_query_param: str = Field(
        default="r",
        alias="SHARE_QUERY_PARAM",
        description="Query parameter carrying the share token in links; empty uses the URL fragment.",
    )
    accept_legacy_tokens: bool = Field(
        default=True,
        alias="ACCEPT_LEGACY_TOKENS",
        description="Accept tokens that carry no catalog fingerprint.",
    )

    # -------------------------------------------------------------------------
    # Servers
    # -------------------------------------------------------------------------
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT", ge=1, le=65535)
    streamlit_port: int = Field(default=8501, alias="STREAMLIT_PORT", ge=1, le=65535)
    allowed_origins: str = Field(
        default="*",
        alias="ALLOWED_ORIGINS",
        description="Comma separated CORS origins.",
    )

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    app_name: str = Field(default="Rean Motivation Survey", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="text", alias="LOG_FORMAT")  # "text" or "json"
    environment: str = Field(default="local", alias="ENVIRONMENT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Ensure log format is valid."""
        lower = v.lower()
        if lower not in {"text", "json"}:
            raise ValueError("log_format must be 'text' or 'json'")
        return lower

    @field_validator("public_base_url")
    @classmethod
    def validate_public_base_url(cls, v: str) -> str:
        """Share links are built by appending to this URL, so drop any fragment."""
        return v.split("#", 1)[0]

    def get_allowed_origins(self) -> list[str]:
        """Split the CORS origin setting into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached. To reload settings,
    call `get_settings.cache_clear()` first.

    Returns:
        Settings object with all configuration.

    Raises:
        ConfigurationError: If the environment holds an invalid value.
    """
    try:
        return Settings()
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def reload_settings() -> Settings:
    """
    Clear settings cache and reload from environment.

    Useful for testing or after modifying .env file.
    """
    get_settings.cache_clear()
    return get_settings()
