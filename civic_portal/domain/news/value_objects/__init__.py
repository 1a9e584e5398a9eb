"""News value objects."""

from .identifiers import AuthorId, NewsId
from .news_category import NewsCategory
from .published_date import PublishedDate
from .reading_time import ReadingTime

__all__ = [
    "NewsId",
    "AuthorId",
    "NewsCategory",
    "ReadingTime",
    "PublishedDate",
]
