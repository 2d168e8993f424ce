"""
Configuration settings for Garden Swap onboarding
Handles environment variables and application settings
"""
from functools import lru_cache
from typing import Annotated, Optional, List
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    """Server-side settings. Holds the privileged service role key."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields from .env file
    )

    # Application
    APP_NAME: str = "garden-swap"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:3000",
    ]

    # Supabase (trusted backend client only)
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # Remote transactional procedure
    ONBOARD_RPC_NAME: str = "onboard_user_tx"

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class PublicSettings(BaseSettings):
    """
    Settings visible to the browser-side signup path.
    Never carries the service role key.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    ONBOARD_API_URL: str = "http://localhost:8000/api/onboard"


@lru_cache
def get_settings() -> Settings:
    settings = Settings()

    # Environment-specific overrides
    if settings.ENVIRONMENT == "development":
        settings.DEBUG = True
        settings.ALLOWED_ORIGINS.extend([
            "http://127.0.0.1:3000",
            "http://localhost:8000",
        ])

    return settings


@lru_cache
def get_public_settings() -> PublicSettings:
    return PublicSettings()


# Validation
def validate_settings(settings: Settings):
    """Validate critical settings"""
    issues = []

    if settings.ENVIRONMENT == "production":
        if not settings.SUPABASE_URL:
            issues.append("SUPABASE_URL must be set")
        if not settings.SUPABASE_SERVICE_ROLE_KEY:
            issues.append("SUPABASE_SERVICE_ROLE_KEY must be set")

    if issues:
        raise ValueError(f"Configuration issues: {', '.join(issues)}")
