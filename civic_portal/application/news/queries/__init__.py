"""News queries."""

from .get_recent_news import GetRecentNewsQuery

__all__ = ["GetRecentNewsQuery"]
