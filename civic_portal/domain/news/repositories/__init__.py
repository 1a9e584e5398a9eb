"""News repository interfaces."""

from .news_repository import NewsFilters, NewsRepository

__all__ = ["NewsRepository", "NewsFilters"]
