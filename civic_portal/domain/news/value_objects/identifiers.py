"""News identifiers."""

from dataclasses import dataclass

from civic_portal.domain.shared import Identifier


@dataclass(frozen=True)
class NewsId(Identifier):
    """UUID v4 identifier of a news article."""


@dataclass(frozen=True)
class AuthorId(Identifier):
    """UUID v4 identifier of an article author."""
