"""News use case handlers."""

from .get_recent_news_handler import GetRecentNewsHandler

__all__ = ["GetRecentNewsHandler"]
