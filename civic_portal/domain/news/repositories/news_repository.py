"""NewsRepository Port - interface for news article persistence."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from civic_portal.domain.shared import Page, PaginationOptions, Slug, SortOptions

from ..entities import NewsArticle
from ..value_objects import AuthorId, NewsCategory, NewsId


@dataclass(frozen=True)
class NewsFilters:
    """Repository-side news filter. None means "any"."""

    category: NewsCategory | None = None
    author_id: AuthorId | None = None
    tags: tuple[str, ...] = ()
    is_published: bool | None = None
    is_featured: bool | None = None
    search_query: str | None = None
    published_after: datetime | None = None
    published_before: datetime | None = None


class NewsRepository(ABC):
    """Abstract interface for news persistence."""

    @abstractmethod
    async def find_by_id(self, news_id: NewsId) -> Optional[NewsArticle]:
        """Get article by ID.

        Returns:
            NewsArticle entity or None if not found.
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[NewsArticle]:
        pass

    @abstractmethod
    async def find_all(
        self,
        filters: NewsFilters | None = None,
        sort: SortOptions | None = None,
        pagination: PaginationOptions | None = None,
    ) -> Page[NewsArticle]:
        """Query articles.

        Args:
            filters: Optional filter; None returns every article.
            sort: Sort field (title, published_at, created_at) and direction.
            pagination: Page to return; None returns everything as page 1.
        """
        pass

    @abstractmethod
    async def find_published(
        self, pagination: PaginationOptions | None = None
    ) -> Page[NewsArticle]:
        pass

    @abstractmethod
    async def find_drafts(self) -> list[NewsArticle]:
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 5) -> list[NewsArticle]:
        """Published articles, newest first."""
        pass

    @abstractmethod
    async def find_by_category(self, category: NewsCategory) -> list[NewsArticle]:
        pass

    @abstractmethod
    async def find_by_author(self, author_id: AuthorId) -> list[NewsArticle]:
        pass

    @abstractmethod
    async def save(self, article: NewsArticle) -> None:
        pass

    @abstractmethod
    async def delete(self, news_id: NewsId) -> None:
        pass

    @abstractmethod
    async def exists(self, news_id: NewsId) -> bool:
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug, exclude_id: NewsId | None = None) -> bool:
        """Check slug uniqueness, ignoring the article being edited."""
        pass

    @abstractmethod
    async def count_by_category(self, category: NewsCategory) -> int:
        pass

    @abstractmethod
    async def get_popular_tags(self, limit: int = 10) -> list[str]:
        pass
