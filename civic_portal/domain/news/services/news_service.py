"""NewsService - stateless queries over news articles."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Sequence

from civic_portal.domain.shared import (
    DomainEnum,
    SortDirection,
    TagCount,
    collation_key,
    count_tags,
    ensure_aware,
    is_ignored,
    normalize_query,
    sort_items,
)

from ..entities import NewsArticle
from ..value_objects import AuthorId, NewsCategory

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class NewsSortField(DomainEnum):
    """Fields the news listing can be sorted by."""

    TITLE = "title"
    PUBLISHED_AT = "published_at"
    CREATED_AT = "created_at"
    READING_TIME = "reading_time"


@dataclass(frozen=True)
class NewsCriteria:
    """News filter. None (or "all" for category) disables a criterion."""

    category: NewsCategory | str | None = None
    author_id: AuthorId | None = None
    tags: tuple[str, ...] = ()
    is_published: bool | None = None
    is_featured: bool | None = None
    published_after: datetime | None = None
    published_before: datetime | None = None


@dataclass(frozen=True)
class NewsStats:
    total: int = 0
    published: int = 0
    drafts: int = 0
    featured: int = 0
    recent: int = 0
    category_distribution: dict[str, int] = field(default_factory=dict)


class NewsService:
    """Filter/search/sort/statistics over news articles.

    Drafts never show up in featured, recent, category or tag listings.
    """

    FEATURED_LIMIT = 3
    RECENT_LIMIT = 5
    POPULAR_TAGS_LIMIT = 10

    @staticmethod
    def filter_news(articles: Sequence[NewsArticle], criteria: NewsCriteria) -> list[NewsArticle]:
        """Keep articles that satisfy every active criterion.

        Date bounds only match published articles.
        """
        after = ensure_aware(criteria.published_after) if criteria.published_after else None
        before = ensure_aware(criteria.published_before) if criteria.published_before else None

        def matches(article: NewsArticle) -> bool:
            if not is_ignored(criteria.category) and article.category != criteria.category:
                return False
            if criteria.author_id is not None and article.author_id != criteria.author_id:
                return False
            if criteria.tags and not any(article.has_tag(t) for t in criteria.tags):
                return False
            if criteria.is_published is not None and article.is_published != criteria.is_published:
                return False
            if criteria.is_featured is not None and article.is_featured != criteria.is_featured:
                return False
            if after and (article.published_at is None or article.published_at < after):
                return False
            if before and (article.published_at is None or article.published_at > before):
                return False
            return True

        return [article for article in articles if matches(article)]

    @staticmethod
    def search_news(articles: Sequence[NewsArticle], query: str | None) -> list[NewsArticle]:
        if not normalize_query(query):
            return list(articles)
        return [article for article in articles if article.matches_search(query)]

    @staticmethod
    def sort_news(
        articles: Sequence[NewsArticle],
        sort_by: NewsSortField | str = NewsSortField.PUBLISHED_AT,
        direction: SortDirection | str = SortDirection.DESC,
    ) -> list[NewsArticle]:
        """Stable sort, newest publication first by default.

        Drafts sort as if published at the Unix epoch.
        """
        sort_by = NewsSortField(sort_by)
        keys = {
            NewsSortField.TITLE: lambda a: collation_key(a.title),
            NewsSortField.PUBLISHED_AT: lambda a: a.published_at or _EPOCH,
            NewsSortField.CREATED_AT: lambda a: a.created_at,
            NewsSortField.READING_TIME: lambda a: a.reading_time.minutes,
        }
        return sort_items(articles, keys[sort_by], SortDirection(direction))

    @classmethod
    def get_featured_news(
        cls, articles: Sequence[NewsArticle], limit: int = FEATURED_LIMIT
    ) -> list[NewsArticle]:
        """Published and featured, newest first."""
        featured = cls.filter_news(articles, NewsCriteria(is_published=True, is_featured=True))
        return cls.sort_news(featured)[:limit]

    @classmethod
    def get_recent_news(
        cls, articles: Sequence[NewsArticle], limit: int = RECENT_LIMIT
    ) -> list[NewsArticle]:
        published = cls.filter_news(articles, NewsCriteria(is_published=True))
        return cls.sort_news(published)[:limit]

    @classmethod
    def get_news_by_category(
        cls, articles: Sequence[NewsArticle], category: NewsCategory | str
    ) -> list[NewsArticle]:
        return cls.filter_news(articles, NewsCriteria(category=category, is_published=True))

    @classmethod
    def get_popular_tags(
        cls, articles: Sequence[NewsArticle], limit: int = POPULAR_TAGS_LIMIT
    ) -> list[TagCount]:
        """Tag counts over published articles only."""
        return count_tags((a.tags for a in articles if a.is_published), limit)

    @staticmethod
    def get_news_stats(
        articles: Sequence[NewsArticle], now: datetime | None = None
    ) -> NewsStats:
        """Single-pass counts; ``recent`` means published in the last 7 days."""
        published = 0
        featured = 0
        recent = 0
        by_category: dict[str, int] = {}

        for article in articles:
            if article.is_featured:
                featured += 1
            if not article.is_published:
                continue
            published += 1
            if article.is_recent(now=now):
                recent += 1
            key = article.category.value
            by_category[key] = by_category.get(key, 0) + 1

        return NewsStats(
            total=len(articles),
            published=published,
            drafts=len(articles) - published,
            featured=featured,
            recent=recent,
            category_distribution=by_category,
        )
