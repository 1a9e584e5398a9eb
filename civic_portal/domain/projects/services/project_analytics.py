"""ProjectAnalytics - scoring helpers for project highlights."""

from typing import Sequence

from civic_portal.domain.shared import DomainEnum

from ..entities import Project
from ..value_objects import ProjectCategory

HIGH_IMPACT_STARS = 100
MEDIUM_IMPACT_STARS = 20


class ImpactLevel(DomainEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProjectAnalytics:
    """Rankings and health scoring for projects."""

    @staticmethod
    def find_top_performers(projects: Sequence[Project], limit: int = 5) -> list[Project]:
        """Projects with the most stars, forks breaking ties."""
        ranked = sorted(
            projects, key=lambda p: (p.star_count, p.fork_count), reverse=True
        )
        return ranked[:limit]

    @staticmethod
    def find_by_category(
        projects: Sequence[Project], category: ProjectCategory
    ) -> list[Project]:
        return [project for project in projects if project.category == category]

    @staticmethod
    def calculate_health_score(project: Project) -> int:
        """Score 0..100 describing how complete and alive a project looks.

        Points:
            stars > 0: 20, forks > 0: 15, active: 25, has tags: 10,
            GitHub URL: 15, website URL: 15.
        """
        score = 0
        if project.star_count > 0:
            score += 20
        if project.fork_count > 0:
            score += 15
        if project.is_active():
            score += 25
        if project.tags:
            score += 10
        if project.github_url is not None:
            score += 15
        if project.website_url is not None:
            score += 15
        return score

    @staticmethod
    def get_impact_level(project: Project) -> ImpactLevel:
        if project.star_count >= HIGH_IMPACT_STARS:
            return ImpactLevel.HIGH
        if project.star_count >= MEDIUM_IMPACT_STARS:
            return ImpactLevel.MEDIUM
        return ImpactLevel.LOW
