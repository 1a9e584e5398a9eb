"""GetRecentNews Handler."""

import logging

from civic_portal.application.news.dtos import NewsDTO
from civic_portal.application.news.queries import GetRecentNewsQuery
from civic_portal.application.shared import QueryHandler
from civic_portal.config import get_settings
from civic_portal.domain.news import NewsRepository

logger = logging.getLogger(__name__)


class GetRecentNewsHandler(QueryHandler[GetRecentNewsQuery, list[NewsDTO]]):
    def __init__(self, news_repo: NewsRepository) -> None:
        self._news_repo = news_repo

    async def handle(self, query: GetRecentNewsQuery) -> list[NewsDTO]:
        limit = query.limit or get_settings().recent_news_limit
        articles = await self._news_repo.find_recent(limit)

        logger.debug(
            "get_recent_news.completed",
            extra={"limit": limit, "count": len(articles)},
        )
        return [NewsDTO.from_entity(article) for article in articles]
