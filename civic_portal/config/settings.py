"""Application Settings using Pydantic.

Environment-based configuration with validation.

Environment Variables:
    ENVIRONMENT: development | staging | production
    LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
    LOG_FORMAT: json | console
    FEATURED_PROJECTS_LIMIT: Projects shown on the landing page

Example .env file:
    ENVIRONMENT=production
    LOG_FORMAT=json
    FEATURED_PROJECTS_LIMIT=6
    RECENT_NEWS_LIMIT=5
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Only the application layer and logging read them; the domain layer
    receives limits as plain arguments.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Core ====================
    environment: Literal["development", "staging", "production"] = "development"

    # ==================== Listings ====================
    featured_projects_limit: int = Field(default=6, ge=1, le=50)
    upcoming_events_limit: int = Field(default=10, ge=1, le=100)
    recent_news_limit: int = Field(default=5, ge=1, le=100)

    # Pagination
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1, le=1000)

    # ==================== Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # ==================== Validators ====================

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        """Default page size must fit under the maximum."""
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size cannot exceed max_page_size")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings instance.
    """
    return Settings()
