"""
Configuration management for crosslist.

Uses pydantic-settings for type-safe configuration with environment variable support.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crosslist.models import FailurePolicy


class ClassifierSettings(BaseSettings):
    """Classification service settings loaded from CLASSIFIER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSIFIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Anthropic API (ambient credential, used by the SDK adapter and the backend)
    anthropic_api_key: str = ""
    model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 4000
    temperature: float = 0.3
    timeout: float = 60.0  # seconds

    # Raw Messages API endpoint for the explicit-credential adapter
    api_url: str = "https://api.anthropic.com/v1/messages"
    api_version: str = "2023-06-01"

    # Backend endpoint for the proxied adapter
    backend_url: str = "http://localhost:8000/api/classify"

    # Overrides the per-adapter default when set
    on_failure: FailurePolicy | None = None


class InstagramSettings(BaseSettings):
    """Instagram scraper settings loaded from INSTAGRAM_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INSTAGRAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    session_id: str = ""
    base_url: str = "https://www.instagram.com"
    app_id: str = "936619743392459"
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    page_size: int = 50
    max_users: int = 500  # stop paginating past this many profiles
    timeout: float = 30.0  # seconds

    @field_validator("page_size", "max_users")
    @classmethod
    def positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v


class APISettings(BaseSettings):
    """API server settings."""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


class Settings(BaseSettings):
    """Main settings class that combines all settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)
    instagram: InstagramSettings = Field(default_factory=InstagramSettings)
    api: APISettings = Field(default_factory=APISettings)

    # Logging
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
