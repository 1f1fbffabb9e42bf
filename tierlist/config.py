"""
Centralized application configuration using pydantic-settings.

All settings are read from environment variables or .env file.
Leave LOCAL_STORE_PATH unset to run without durable storage (headless).
"""

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Priority: environment variables > .env file > defaults
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    # --- Share links / previews ---
    BASE_URL: str = Field(
        default="http://localhost:3000",
        description="Origin used to build absolute asset and share URLs"
    )
    SHARE_PATH: str = Field(
        default="/",
        description="Page that reads the ?state= token"
    )
    MAX_SHARE_URL_LENGTH: int = Field(
        default=8000,
        description="Longest share URL the API will hand out"
    )

    # --- Local storage ---
    LOCAL_STORE_PATH: Optional[str] = Field(
        default=None,
        description="JSON file backing the custom item registry (unset = in-memory only)"
    )

    # --- Server ---
    HOST: str = Field(
        default="127.0.0.1",
        description="Server bind host"
    )
    PORT: int = Field(
        default=3000,
        description="Server bind port"
    )

    # --- Debug / Logging ---
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v_upper

    @field_validator("BASE_URL")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("BASE_URL must be an absolute http(s) origin")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance (singleton pattern)."""
    return Settings()


# --- Singleton instance for easy import ---
settings = get_settings()


# --- Module-level exports ---

# Share links
BASE_URL: str = settings.BASE_URL
SHARE_PATH: str = settings.SHARE_PATH
MAX_SHARE_URL_LENGTH: int = settings.MAX_SHARE_URL_LENGTH

# Storage
LOCAL_STORE_PATH: Optional[str] = settings.LOCAL_STORE_PATH

# Server
HOST: str = settings.HOST
PORT: int = settings.PORT
DEBUG: bool = settings.DEBUG
LOG_LEVEL: str = settings.LOG_LEVEL

# --- Paths (computed, not from env) ---
PROJECT_ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
LOGS_PATH: str = os.path.join(PROJECT_ROOT, "logs")
