"""UpdateProject Command - change status, GitHub stats or tags of a project."""

from dataclasses import dataclass
from enum import Enum

from civic_portal.application.shared import Command


class UpdateProjectError(str, Enum):
    """Expected failures of UpdateProject."""

    INVALID_PROJECT_ID = "INVALID_PROJECT_ID"
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    INVALID_DATA = "INVALID_DATA"


@dataclass(frozen=True)
class UpdateProjectCommand(Command):
    """Command to update a project through ProjectAggregate.

    Omitted fields are left unchanged. When only one of the counts is given
    the other keeps its current value.

    Example:
        >>> command = UpdateProjectCommand(
        ...     project_id="5f0c...",
        ...     status="completed",
        ...     tags_to_add=("archived-data",),
        ... )
        >>> result = await handler.handle(command)
        >>> result.value.events[0]["event_type"]
        'ProjectStatusChanged'
    """

    project_id: str
    """Project UUID."""

    status: str | None = None
    """Target status value ("active", "completed", ...)."""

    star_count: int | None = None
    fork_count: int | None = None

    tags_to_add: tuple[str, ...] = ()
    tags_to_remove: tuple[str, ...] = ()
