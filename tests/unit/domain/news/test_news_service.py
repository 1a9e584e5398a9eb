"""Unit tests for NewsService."""

from datetime import datetime, timedelta, timezone

import pytest

from civic_portal.domain.news import NewsCategory, NewsCriteria, NewsService, NewsSortField
from civic_portal.domain.shared import SortDirection

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def release(make_article):
    return make_article(
        title="Portal Release",
        published=True,
        published_at=NOW - timedelta(days=2),
        tags=("release", "portal"),
        is_featured=True,
    )


@pytest.fixture
def tutorial(make_article):
    return make_article(
        title="Using the API",
        category=NewsCategory.TUTORIAL,
        content="word " * 600,
        published=True,
        published_at=NOW - timedelta(days=20),
        tags=("api", "portal"),
    )


@pytest.fixture
def draft(make_article):
    return make_article(
        title="Upcoming Changes",
        category=NewsCategory.ANNOUNCEMENT,
        tags=("portal",),
        is_featured=True,
    )


@pytest.fixture
def articles(release, tutorial, draft):
    return [release, tutorial, draft]


class TestNewsStats:
    """Tests for NewsService.get_news_stats()."""

    def test_counts_published_and_drafts(self, articles):
        # Act
        stats = NewsService.get_news_stats(articles, now=NOW)

        # Assert
        assert stats.total == 3
        assert stats.published == 2
        assert stats.drafts == 1
        assert stats.featured == 2
        assert stats.recent == 1
        assert stats.category_distribution == {"release": 1, "tutorial": 1}


class TestFilterAndSort:
    """Tests for filtering, searching and sorting."""

    def test_filter_by_category(self, articles, tutorial):
        criteria = NewsCriteria(category=NewsCategory.TUTORIAL)

        assert NewsService.filter_news(articles, criteria) == [tutorial]

    def test_category_all_is_ignored(self, articles):
        assert NewsService.filter_news(articles, NewsCriteria(category="all")) == articles

    def test_date_bounds_skip_drafts(self, articles, release):
        criteria = NewsCriteria(published_after=NOW - timedelta(days=7))

        assert NewsService.filter_news(articles, criteria) == [release]

    def test_filter_by_author(self, articles, release):
        criteria = NewsCriteria(author_id=release.author_id)

        assert NewsService.filter_news(articles, criteria) == [release]

    def test_search(self, articles, tutorial):
        assert NewsService.search_news(articles, "api") == [tutorial]
        assert NewsService.search_news(articles, "  ") == articles

    def test_default_sort_newest_first_drafts_last(self, articles, release, tutorial, draft):
        assert NewsService.sort_news(articles) == [release, tutorial, draft]

    def test_sort_by_reading_time(self, articles, tutorial):
        result = NewsService.sort_news(
            articles, NewsSortField.READING_TIME, SortDirection.DESC
        )

        assert result[0] == tutorial

    def test_sort_by_title(self, articles, release, tutorial, draft):
        result = NewsService.sort_news(articles, "title", "asc")

        assert result == [release, draft, tutorial]


class TestCuratedLists:
    """Tests for featured, recent, category and tag listings."""

    def test_featured_excludes_drafts(self, articles, release):
        assert NewsService.get_featured_news(articles) == [release]

    def test_recent_news(self, articles, release, tutorial):
        assert NewsService.get_recent_news(articles) == [release, tutorial]
        assert NewsService.get_recent_news(articles, limit=1) == [release]

    def test_news_by_category_published_only(self, articles):
        result = NewsService.get_news_by_category(articles, NewsCategory.ANNOUNCEMENT)

        assert result == []

    def test_popular_tags_ignore_drafts(self, articles):
        result = NewsService.get_popular_tags(articles)

        assert [(t.tag, t.count) for t in result] == [("portal", 2), ("release", 1), ("api", 1)]
