"""News DTOs for the presentation layer."""

from dataclasses import asdict, dataclass
from typing import Any

from civic_portal.domain.news import NewsArticle


@dataclass(frozen=True)
class NewsDTO:
    """Article summary for listings. The full content is not included."""

    id: str
    title: str
    slug: str
    excerpt: str
    category: str
    author_id: str
    author_name: str | None
    tags: list[str]
    reading_time_minutes: int
    is_featured: bool
    published_at: str | None
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, article: NewsArticle) -> "NewsDTO":
        return cls(
            id=article.id.value,
            title=article.title,
            slug=article.slug.value,
            excerpt=article.excerpt,
            category=article.category.value,
            author_id=article.author_id.value,
            author_name=article.author_name,
            tags=list(article.tags),
            reading_time_minutes=article.reading_time.minutes,
            is_featured=article.is_featured,
            published_at=article.published_at.isoformat() if article.published_at else None,
            created_at=article.created_at.isoformat(),
            updated_at=article.updated_at.isoformat(),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
