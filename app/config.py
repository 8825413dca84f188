# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DATABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Every response from the users endpoint is readable from any origin
PUBLIC_CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing is required: the defaults point at a local MySQL database
    named `myapp` with a `users` table.
    """

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------

    DATABASE_URL: str = Field(
        default="mysql+pymysql://root@127.0.0.1:3306/myapp",
        description="SQLAlchemy database URL (driver, credentials, host, port, database)"
    )

    USERS_TABLE: str = Field(
        default="users",
        description="Table holding the user records"
    )

    USERS_NAME_COLUMN: str = Field(
        default="first_name",
        description="Text column returned by GET /users"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    The environment and .env file are parsed once per process.
    """
    return Settings()


settings = get_settings()
