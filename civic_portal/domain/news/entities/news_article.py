"""NewsArticle Entity - a post in the site's news section."""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Any, Iterable

from civic_portal.domain.shared import (
    Entity,
    ErrorCode,
    Slug,
    ensure_aware,
    ensure_text,
    normalize_query,
    resolve_now,
    text_matches,
    utc_now,
    validate_value_object,
)

from ..value_objects import AuthorId, NewsCategory, NewsId, PublishedDate, ReadingTime

MAX_TITLE_LENGTH = 200
MAX_EXCERPT_LENGTH = 500
MAX_CONTENT_LENGTH = 50000
RECENT_DAYS = 7


@dataclass(frozen=True, kw_only=True)
class NewsArticle(Entity):
    """News article entity.

    Lifecycle:
        draft --publish()--> published --unpublish()--> draft

    Publishing twice is a no-op that returns the same instance, so
    published_at keeps the first publication time.
    """

    id: NewsId
    title: str
    slug: Slug
    excerpt: str
    content: str
    category: NewsCategory
    author_id: AuthorId
    author_name: str | None = None
    tags: tuple[str, ...] = ()
    is_published: bool = False
    is_featured: bool = False
    published_at: datetime | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "tags", tuple(self.tags))
        if self.published_at is not None:
            object.__setattr__(self, "published_at", ensure_aware(self.published_at))
        ensure_text(self.title, field="title", label="News title", max_length=MAX_TITLE_LENGTH)
        ensure_text(
            self.excerpt, field="excerpt", label="News excerpt", max_length=MAX_EXCERPT_LENGTH
        )
        ensure_text(
            self.content, field="content", label="News content", max_length=MAX_CONTENT_LENGTH
        )
        validate_value_object(
            not self.is_published or self.published_at is not None,
            "Published article must have a publication date",
            field="published_at",
            code=ErrorCode.INVALID_VALUE,
        )

    # ==================== Factory Methods ====================

    @classmethod
    def create(
        cls,
        *,
        title: str,
        excerpt: str,
        content: str,
        category: NewsCategory,
        author_id: AuthorId,
        author_name: str | None = None,
        tags: Iterable[str] = (),
        is_featured: bool = False,
    ) -> "NewsArticle":
        """Create a draft article. The slug is derived from the title.

        Titles without any ASCII letters or digits get a slug built from
        the article id ("news-1a2b3c4d").
        """
        news_id = NewsId.generate()
        now = utc_now()
        return cls(
            id=news_id,
            title=title,
            slug=Slug.from_title(title, fallback=_fallback_slug(news_id)),
            excerpt=excerpt,
            content=content,
            category=category,
            author_id=author_id,
            author_name=author_name,
            tags=tuple(tags),
            is_published=False,
            is_featured=is_featured,
            published_at=None,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_persistence(
        cls,
        *,
        id: NewsId,
        title: str,
        slug: Slug,
        excerpt: str,
        content: str,
        category: NewsCategory,
        author_id: AuthorId,
        created_at: datetime,
        updated_at: datetime,
        author_name: str | None = None,
        tags: Iterable[str] = (),
        is_published: bool = False,
        is_featured: bool = False,
        published_at: datetime | None = None,
    ) -> "NewsArticle":
        """Rehydrate a stored article. All invariants are checked again."""
        return cls(
            id=id,
            title=title,
            slug=slug,
            excerpt=excerpt,
            content=content,
            category=category,
            author_id=author_id,
            author_name=author_name,
            tags=tuple(tags),
            is_published=is_published,
            is_featured=is_featured,
            published_at=published_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    # ==================== Derived Values ====================

    @property
    def reading_time(self) -> ReadingTime:
        return ReadingTime.calculate_from_content(self.content)

    @property
    def published_date(self) -> PublishedDate | None:
        if self.published_at is None:
            return None
        return PublishedDate(self.published_at)

    def is_draft(self) -> bool:
        return not self.is_published

    def is_recent(self, days: int = RECENT_DAYS, now: datetime | None = None) -> bool:
        """Published within the last ``days`` days."""
        if self.published_at is None:
            return False
        return self.published_at >= resolve_now(now) - timedelta(days=days)

    def has_tag(self, tag: str) -> bool:
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def matches_search(self, query: str) -> bool:
        """Case-insensitive match on title, excerpt, content and tags."""
        needle = normalize_query(query)
        if not needle:
            return True
        return text_matches(needle, self.title, self.excerpt, self.content, *self.tags)

    # ==================== Publishing ====================

    def publish(self) -> "NewsArticle":
        if self.is_published:
            return self
        moment = self._next_updated_at()
        return replace(self, is_published=True, published_at=moment, updated_at=moment)

    def unpublish(self) -> "NewsArticle":
        if not self.is_published:
            return self
        return self._evolve(is_published=False, published_at=None)

    def feature(self) -> "NewsArticle":
        if self.is_featured:
            return self
        return self._evolve(is_featured=True)

    def unfeature(self) -> "NewsArticle":
        if not self.is_featured:
            return self
        return self._evolve(is_featured=False)

    # ==================== Content ====================

    def update_content(
        self,
        *,
        title: str | None = None,
        excerpt: str | None = None,
        content: str | None = None,
        category: NewsCategory | None = None,
        tags: Iterable[str] | None = None,
    ) -> "NewsArticle":
        """Change article text; a new title also regenerates the slug."""
        changes: dict[str, Any] = {}
        if title is not None:
            changes["title"] = title
            changes["slug"] = Slug.from_title(title, fallback=_fallback_slug(self.id))
        if excerpt is not None:
            changes["excerpt"] = excerpt
        if content is not None:
            changes["content"] = content
        if category is not None:
            changes["category"] = category
        if tags is not None:
            changes["tags"] = tuple(tags)
        return self._evolve(**changes)

    def add_tag(self, tag: str) -> "NewsArticle":
        if tag in self.tags:
            return self
        return self._evolve(tags=self.tags + (tag,))

    def remove_tag(self, tag: str) -> "NewsArticle":
        if tag not in self.tags:
            return self
        return self._evolve(tags=tuple(t for t in self.tags if t != tag))


def _fallback_slug(news_id: NewsId) -> str:
    return f"news-{news_id.value[:8].lower()}"
