"""About domain services."""

from .about_service import AboutService, CompletenessReport, OrganizationStats

__all__ = ["AboutService", "OrganizationStats", "CompletenessReport"]
