"""News Category - kind of news article."""

from civic_portal.domain.shared import DomainEnum


class NewsCategory(DomainEnum):
    """News article category."""

    ANNOUNCEMENT = "announcement"
    RELEASE = "release"
    EVENT = "event"
    COMMUNITY = "community"
    TUTORIAL = "tutorial"
    UPDATE = "update"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()
