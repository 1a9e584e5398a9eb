"""UpdateProject Handler - applies project changes through the aggregate."""

import logging

from civic_portal.application.projects.commands import UpdateProjectCommand, UpdateProjectError
from civic_portal.application.projects.dtos import ProjectDTO, ProjectUpdateDTO
from civic_portal.application.shared import CommandHandler, UseCaseResult
from civic_portal.domain.projects import (
    ProjectAggregate,
    ProjectId,
    ProjectRepository,
    ProjectStatus,
)
from civic_portal.domain.shared import ValidationError
from civic_portal.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class UpdateProjectHandler(CommandHandler[UpdateProjectCommand, UseCaseResult[ProjectUpdateDTO]]):
    """Handler for UpdateProject command.

    Flow:
    1. **Load**: Parse the id and load the project
    2. **Apply**: Status, then GitHub stats, then tags, via ProjectAggregate
    3. **Save**: Persist only when at least one event was raised
    4. **Publish Events**: Dispatch through the EventBus, then clear them

    Example:
        >>> handler = UpdateProjectHandler(project_repo=repo, event_bus=get_event_bus())
        >>> result = await handler.handle(
        ...     UpdateProjectCommand(project_id=project_id, star_count=120)
        ... )
        >>> result.success
        True
    """

    def __init__(self, project_repo: ProjectRepository, event_bus: EventBus) -> None:
        """Initialize handler.

        Args:
            project_repo: Repository for loading and saving projects.
            event_bus: Event bus for publishing domain events.
        """
        self._project_repo = project_repo
        self._event_bus = event_bus

    async def handle(self, command: UpdateProjectCommand) -> UseCaseResult[ProjectUpdateDTO]:
        """Update project.

        Returns:
            UseCaseResult with ProjectUpdateDTO, or an UpdateProjectError code.
        """
        try:
            project_id = ProjectId(command.project_id)
        except ValidationError:
            logger.info(
                "update_project.invalid_id",
                extra={"project_id": command.project_id},
            )
            return UseCaseResult.fail(UpdateProjectError.INVALID_PROJECT_ID)

        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            logger.info(
                "update_project.not_found",
                extra={"project_id": project_id.value},
            )
            return UseCaseResult.fail(UpdateProjectError.PROJECT_NOT_FOUND)

        aggregate = ProjectAggregate.from_project(project)
        try:
            if command.status is not None:
                aggregate.change_status(ProjectStatus(command.status))
            if command.star_count is not None or command.fork_count is not None:
                aggregate.update_github_stats(
                    project.star_count if command.star_count is None else command.star_count,
                    project.fork_count if command.fork_count is None else command.fork_count,
                )
            if command.tags_to_add or command.tags_to_remove:
                aggregate.manage_tags(command.tags_to_add, command.tags_to_remove)
        except ValidationError as e:
            logger.info(
                "update_project.invalid_data",
                extra={"project_id": project_id.value, "field": e.field, "error": str(e)},
            )
            return UseCaseResult.fail(UpdateProjectError.INVALID_DATA)

        events = aggregate.get_domain_events()
        if events:
            await self._project_repo.save(aggregate.project)
            await self._event_bus.publish_all(events)
            aggregate.clear_domain_events()

        logger.info(
            "update_project.completed",
            extra={
                "project_id": project_id.value,
                "events": [event.event_type for event in events],
            },
        )
        return UseCaseResult.ok(
            ProjectUpdateDTO(
                project=ProjectDTO.from_entity(aggregate.project),
                events=[event.to_dict() for event in events],
            )
        )
