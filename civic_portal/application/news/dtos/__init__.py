"""Data Transfer Objects for the news use cases."""

from .news_dto import NewsDTO

__all__ = ["NewsDTO"]
