"""News domain services."""

from .news_service import NewsCriteria, NewsService, NewsSortField, NewsStats

__all__ = ["NewsService", "NewsCriteria", "NewsSortField", "NewsStats"]
