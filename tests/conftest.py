"""Pytest configuration and fixtures."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from civic_portal.config import get_settings
from civic_portal.domain.calendar import DateRange, Event, EventId, EventStatus, EventType, Location
from civic_portal.domain.news import AuthorId, NewsArticle, NewsCategory
from civic_portal.domain.projects import Project, ProjectCategory, ProjectStatus
from civic_portal.domain.shared import Slug
from civic_portal.infrastructure.messaging import reset_event_bus

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fresh_settings_and_bus():
    """Reload settings from the environment and start with an empty event bus."""
    get_settings.cache_clear()
    reset_event_bus()
    yield
    get_settings.cache_clear()


@pytest.fixture
def now():
    """Fixed instant used for time-dependent assertions."""
    return NOW


@pytest.fixture
def make_project():
    """Factory for projects with sensible defaults."""

    def _make(**overrides):
        params = {
            "title": "Open Budget",
            "description": "Explore how the city spends its money",
            "category": ProjectCategory.GOVERNMENT,
            "status": ProjectStatus.ACTIVE,
            "tags": ("transparency",),
            "star_count": 10,
            "fork_count": 2,
        }
        params.update(overrides)
        return Project.create(**params)

    return _make


@pytest.fixture
def make_event():
    """Factory for events; ``start`` defaults to one week after NOW."""

    def _make(**overrides):
        start = overrides.pop("start", NOW + timedelta(days=7))
        hours = overrides.pop("hours", 4)
        params = {
            "id": EventId.generate(),
            "title": "Open Data Workshop",
            "slug": Slug("open-data-workshop"),
            "description": "Hands-on session with city datasets",
            "type": EventType.WORKSHOP,
            "status": EventStatus.UPCOMING,
            "date_range": DateRange.from_duration(start, hours),
            "location": Location.online(),
            "max_participants": 50,
            "current_participants": 0,
            "is_registration_open": True,
            "tags": (),
            "created_at": NOW - timedelta(days=30),
            "updated_at": NOW - timedelta(days=30),
        }
        params.update(overrides)
        return Event.from_persistence(**params)

    return _make


@pytest.fixture
def make_article():
    """Factory for news articles; ``published=True`` publishes at ``published_at``."""

    def _make(published=False, published_at=None, **overrides):
        params = {
            "title": "Release notes",
            "excerpt": "What changed this month",
            "content": "We shipped new features for the open data portal.",
            "category": NewsCategory.RELEASE,
            "author_id": AuthorId.generate(),
        }
        params.update(overrides)
        article = NewsArticle.create(**params)
        if published:
            article = article.publish()
            if published_at is not None:
                article = replace(article, published_at=published_at)
        return article

    return _make
