"""News Bounded Context - Domain Layer (articles and announcements).

Exports:
    Entities: NewsArticle
    Value Objects: NewsId, AuthorId, NewsCategory, ReadingTime, PublishedDate
    Services: NewsService
    Repositories: NewsRepository (interface)
"""

from .entities import NewsArticle
from .repositories import NewsFilters, NewsRepository
from .services import NewsCriteria, NewsService, NewsSortField, NewsStats
from .value_objects import AuthorId, NewsCategory, NewsId, PublishedDate, ReadingTime

__all__ = [
    # Entities
    "NewsArticle",
    # Value Objects
    "NewsId",
    "AuthorId",
    "NewsCategory",
    "ReadingTime",
    "PublishedDate",
    # Domain Services
    "NewsService",
    "NewsCriteria",
    "NewsSortField",
    "NewsStats",
    # Repositories
    "NewsRepository",
    "NewsFilters",
]
