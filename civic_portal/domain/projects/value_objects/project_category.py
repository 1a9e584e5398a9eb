"""Project Category - civic area a project belongs to."""

from civic_portal.domain.shared import DomainEnum


class ProjectCategory(DomainEnum):
    """Project category."""

    GOVERNMENT = "government"
    EDUCATION = "education"
    ENVIRONMENT = "environment"
    HEALTHCARE = "healthcare"
    TRANSPORTATION = "transportation"
    CIVIC_TECH = "civic-tech"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ProjectCategory.GOVERNMENT: "Government",
    ProjectCategory.EDUCATION: "Education",
    ProjectCategory.ENVIRONMENT: "Environment",
    ProjectCategory.HEALTHCARE: "Healthcare",
    ProjectCategory.TRANSPORTATION: "Transportation",
    ProjectCategory.CIVIC_TECH: "Civic Technology",
}
