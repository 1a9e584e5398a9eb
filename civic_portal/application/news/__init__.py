"""News application layer."""

from .dtos import NewsDTO
from .handlers import GetRecentNewsHandler
from .queries import GetRecentNewsQuery

__all__ = ["GetRecentNewsQuery", "NewsDTO", "GetRecentNewsHandler"]
