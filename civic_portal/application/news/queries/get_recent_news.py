"""GetRecentNews Query."""

from dataclasses import dataclass

from civic_portal.application.shared import Query


@dataclass(frozen=True)
class GetRecentNewsQuery(Query):
    """Latest published articles. None uses the configured limit."""

    limit: int | None = None
