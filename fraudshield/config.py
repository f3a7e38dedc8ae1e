"""
FraudShield Application Configuration

Configuration management using pydantic-settings.
All configuration values are loaded from environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List
from functools import lru_cache

from fraudshield.utils.constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_HISTORY_SIZE,
    MAX_CONTENT_LENGTH,
    MAX_CONTENT_PREVIEW_LENGTH,
    MAX_REASONS,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Values can be set via:
    1. Environment variables
    2. .env file (local development)
    3. Default values defined here
    """

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    debug: bool = False
    log_level: str = "INFO"

    # =========================================================================
    # Server
    # =========================================================================
    host: str = "0.0.0.0"
    port: int = Field(default=8000, description="Port - read from the PORT env var when set")
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # =========================================================================
    # Fraud Protection
    # =========================================================================
    fraud_protection_enabled: bool = Field(default=True, description="Run classification on intercepted content")
    alert_history_size: int = Field(default=DEFAULT_HISTORY_SIZE, gt=0, description="Results kept in alert history")
    content_preview_length: int = Field(default=MAX_CONTENT_PREVIEW_LENGTH, gt=0, description="Characters kept in previews")
    max_reasons: int = Field(default=MAX_REASONS, gt=0, description="Reasons kept per result")
    max_content_length: int = Field(default=MAX_CONTENT_LENGTH, gt=0, description="Characters of content analyzed per evaluation")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Use get_settings.cache_clear() to reload settings.
    """
    return Settings()
