"""Unit tests for NewsArticle and news value objects."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from civic_portal.domain.news import (
    AuthorId,
    NewsArticle,
    NewsCategory,
    NewsId,
    PublishedDate,
    ReadingTime,
)
from civic_portal.domain.shared import ErrorCode, Slug, ValidationError

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestReadingTime:
    """Tests for ReadingTime."""

    def test_five_hundred_words_take_three_minutes(self):
        assert ReadingTime.calculate_from_content("word " * 500).minutes == 3

    def test_short_content_takes_one_minute(self):
        assert ReadingTime.calculate_from_content("just a few words").minutes == 1

    def test_display_text(self):
        assert ReadingTime(4).display_text == "4 min read"

    def test_negative_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ReadingTime(-1)

        assert exc_info.value.code == ErrorCode.NEGATIVE_VALUE


class TestPublishedDate:
    """Tests for PublishedDate.time_ago()."""

    @pytest.mark.parametrize(
        "age,label",
        [
            (timedelta(hours=3), "Today"),
            (timedelta(days=1), "Yesterday"),
            (timedelta(days=3), "3 days ago"),
            (timedelta(days=15), "2 weeks ago"),
            (timedelta(days=65), "2 months ago"),
            (timedelta(days=800), "2 years ago"),
        ],
    )
    def test_time_ago(self, age, label):
        assert PublishedDate(NOW - age).time_ago(NOW) == label

    def test_future_and_today(self):
        assert PublishedDate(NOW + timedelta(hours=1)).is_in_future(NOW) is True
        assert PublishedDate(NOW - timedelta(hours=1)).is_today(NOW) is True

    def test_naive_now_is_read_as_utc(self):
        published = PublishedDate(NOW - timedelta(days=3))
        naive_now = NOW.replace(tzinfo=None)

        assert published.days_ago(naive_now) == 3
        assert published.is_in_future(naive_now) is False
        assert published.time_ago(naive_now) == "3 days ago"


class TestNewsArticleLifecycle:
    """Tests for draft/publish transitions."""

    def test_create_is_draft(self, make_article):
        article = make_article(title="Budget Portal 2.0")

        assert article.is_draft() is True
        assert article.published_at is None
        assert article.published_date is None
        assert article.slug.value == "budget-portal-20"

    def test_cjk_title_uses_id_based_slug(self, make_article):
        article = make_article(title="新版本發布")

        assert article.slug.value == f"news-{article.id.value[:8]}"

    def test_publish_sets_publication_time(self, make_article):
        draft = make_article()

        published = draft.publish()

        assert published.is_published is True
        assert published.published_at is not None
        assert published.updated_at == published.published_at
        assert published.updated_at > draft.updated_at

    def test_publish_twice_keeps_first_date(self, make_article):
        published = make_article(published=True)

        again = published.publish()

        assert again is published

    def test_unpublish_clears_date(self, make_article):
        draft = make_article(published=True).unpublish()

        assert draft.is_published is False
        assert draft.published_at is None

    def test_published_requires_date(self, make_article):
        article = make_article()

        with pytest.raises(ValidationError, match="must have a publication date"):
            replace(article, is_published=True)

    def test_feature_toggle(self, make_article):
        article = make_article()

        featured = article.feature()

        assert featured.is_featured is True
        assert featured.feature() is featured
        assert featured.unfeature().is_featured is False

    def test_from_persistence_rehydrates_published_article(self):
        # Arrange
        article_id = NewsId.generate()
        published = datetime(2024, 5, 20, 8, 0)

        # Act
        article = NewsArticle.from_persistence(
            id=article_id,
            title="Budget Portal 2.0",
            slug=Slug("budget-portal-20"),
            excerpt="A faster budget explorer",
            content="We rebuilt the budget portal from scratch.",
            category=NewsCategory.ANNOUNCEMENT,
            author_id=AuthorId.generate(),
            tags=["budget"],
            is_published=True,
            published_at=published,
            created_at=published,
            updated_at=published,
        )

        # Assert
        assert article.id == article_id
        assert article.tags == ("budget",)
        assert article.published_at == datetime(2024, 5, 20, 8, 0, tzinfo=timezone.utc)

    def test_from_persistence_requires_publication_date(self):
        with pytest.raises(ValidationError, match="must have a publication date"):
            NewsArticle.from_persistence(
                id=NewsId.generate(),
                title="Budget Portal 2.0",
                slug=Slug("budget-portal-20"),
                excerpt="A faster budget explorer",
                content="We rebuilt the budget portal from scratch.",
                category=NewsCategory.ANNOUNCEMENT,
                author_id=AuthorId.generate(),
                is_published=True,
                created_at=NOW,
                updated_at=NOW,
            )


class TestNewsArticleContent:
    """Tests for content updates and search."""

    def test_update_title_regenerates_slug(self, make_article):
        updated = make_article().update_content(title="Winter Update")

        assert updated.slug.value == "winter-update"

    def test_tags(self, make_article):
        article = make_article().add_tag("opendata")

        assert article.has_tag("OpenData") is True
        assert article.add_tag("opendata") is article
        assert article.remove_tag("opendata").tags == ()

    def test_matches_search(self, make_article):
        article = make_article(tags=("budget",))

        assert article.matches_search("OPEN DATA") is True
        assert article.matches_search("budget") is True
        assert article.matches_search("weather") is False

    def test_is_recent(self, make_article):
        article = make_article(published=True, published_at=NOW - timedelta(days=3))

        assert article.is_recent(now=NOW) is True
        assert article.is_recent(days=2, now=NOW) is False

    def test_is_recent_accepts_naive_now(self, make_article):
        article = make_article(published=True, published_at=NOW - timedelta(days=3))

        assert article.is_recent(now=NOW.replace(tzinfo=None)) is True

    def test_reading_time_follows_content(self, make_article):
        article = make_article(content="word " * 401)

        assert article.reading_time.minutes == 3

    def test_title_too_long_rejected(self, make_article):
        with pytest.raises(ValidationError, match="News title cannot exceed 200"):
            make_article(title="x" * 201)

    def test_category_enum_rejects_unknown(self):
        with pytest.raises(ValidationError, match="Invalid NewsCategory"):
            NewsCategory("gossip")
