"""Project Status - lifecycle states of a project."""

from civic_portal.domain.shared import DomainEnum


class ProjectStatus(DomainEnum):
    """Project lifecycle status.

    Flow:
        PLANNING → ACTIVE → COMPLETED
            ↘         ↘        ↘
              ARCHIVED ← ← ← ←

    Completed projects can be reactivated; archived ones can go back to
    planning or straight to active.
    """

    ACTIVE = "active"
    COMPLETED = "completed"
    PLANNING = "planning"
    ARCHIVED = "archived"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def is_active(self) -> bool:
        return self == ProjectStatus.ACTIVE

    def is_completed(self) -> bool:
        return self == ProjectStatus.COMPLETED

    def is_planning(self) -> bool:
        return self == ProjectStatus.PLANNING

    def is_archived(self) -> bool:
        return self == ProjectStatus.ARCHIVED

    def can_transition_to(self, new_status: "ProjectStatus") -> bool:
        """Check the transition table.

        Args:
            new_status: Target status.

        Returns:
            True if the move is allowed from the current status.

        Note:
            The table is advisory; ProjectAggregate.change_status does not
            enforce it.
        """
        return new_status in _TRANSITIONS[self]


_TRANSITIONS = {
    ProjectStatus.PLANNING: frozenset({ProjectStatus.ACTIVE, ProjectStatus.ARCHIVED}),
    ProjectStatus.ACTIVE: frozenset({ProjectStatus.COMPLETED, ProjectStatus.ARCHIVED}),
    ProjectStatus.COMPLETED: frozenset({ProjectStatus.ACTIVE, ProjectStatus.ARCHIVED}),
    ProjectStatus.ARCHIVED: frozenset({ProjectStatus.PLANNING, ProjectStatus.ACTIVE}),
}
