"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from civic_portal.config import Settings, get_settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self):
        settings = Settings()

        assert settings.environment == "development"
        assert settings.is_development is True
        assert settings.featured_projects_limit == 6
        assert settings.upcoming_events_limit == 10
        assert settings.recent_news_limit == 5
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100

    def test_only_consumed_fields_are_declared(self):
        assert set(Settings.model_fields) == {
            "environment",
            "featured_projects_limit",
            "upcoming_events_limit",
            "recent_news_limit",
            "default_page_size",
            "max_page_size",
            "log_level",
            "log_format",
        }

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_FORMAT", "console")

        settings = Settings()

        assert settings.is_production is True
        assert settings.log_format == "console"

    def test_page_size_must_fit_maximum(self):
        with pytest.raises(ValidationError, match="default_page_size cannot exceed"):
            Settings(default_page_size=50, max_page_size=20)

    def test_limit_bounds(self):
        with pytest.raises(ValidationError):
            Settings(featured_projects_limit=0)

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("FEATURED_PROJECTS_LIMIT", "9")

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings().featured_projects_limit == 9
