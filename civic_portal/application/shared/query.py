"""Base Query class for the CQRS pattern.

Query - a request to read data. Queries have no side effects.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Query(ABC):
    """Base class for all queries.

    Example:
        >>> @dataclass(frozen=True)
        ... class GetRecentNewsQuery(Query):
        ...     limit: int | None = None

        >>> news = await handler.handle(GetRecentNewsQuery(limit=3))
    """

    pass
