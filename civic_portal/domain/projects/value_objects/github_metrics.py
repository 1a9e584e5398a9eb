"""GitHub Metrics - repository stars and forks."""

from dataclasses import dataclass

from civic_portal.domain.shared import ValueObject, ensure_non_negative


@dataclass(frozen=True)
class GitHubMetrics(ValueObject):
    """Stars and forks of a project's repository.

    Example:
        >>> GitHubMetrics(stars=10, forks=3).popularity_score
        23
    """

    stars: int = 0
    forks: int = 0

    def __post_init__(self) -> None:
        ensure_non_negative(self.stars, field="stars", label="Star count")
        ensure_non_negative(self.forks, field="forks", label="Fork count")

    @property
    def popularity_score(self) -> int:
        """Stars weigh twice as much as forks."""
        return self.stars * 2 + self.forks
