"""Base Handler classes for Commands and Queries.

Handler - orchestrates domain logic to carry out one use case.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .command import Command
from .query import Query

TCommand = TypeVar("TCommand", bound=Command)
TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Base class for command handlers.

    Command Handler is responsible for:
    - Loading entities from a repository
    - Running domain logic (aggregate operations)
    - Saving changes
    - Publishing domain events

    Example:
        >>> class UpdateProjectHandler(CommandHandler[UpdateProjectCommand, UseCaseResult]):
        ...     def __init__(self, project_repo: ProjectRepository, event_bus: EventBus):
        ...         self._project_repo = project_repo
        ...         self._event_bus = event_bus
        ...
        ...     async def handle(self, command: UpdateProjectCommand) -> UseCaseResult:
        ...         project = await self._project_repo.find_by_id(ProjectId(command.project_id))
        ...         aggregate = ProjectAggregate.from_project(project)
        ...         aggregate.change_status(ProjectStatus(command.status))
        ...         await self._project_repo.save(aggregate.project)
        ...         await self._event_bus.publish_all(aggregate.get_domain_events())
        ...         aggregate.clear_domain_events()
        ...         return UseCaseResult.ok(ProjectDTO.from_entity(aggregate.project))
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """Handle command and return result.

        Args:
            command: Command to handle.

        Returns:
            Result of command execution.
        """
        pass


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Base class for query handlers.

    Query Handler is responsible for:
    - Fetching entities from a repository
    - Applying filters, sorting, pagination
    - Mapping to DTOs
    - NO side effects (read-only)

    Example:
        >>> class GetRecentNewsHandler(QueryHandler[GetRecentNewsQuery, list[NewsDTO]]):
        ...     def __init__(self, news_repo: NewsRepository):
        ...         self._news_repo = news_repo
        ...
        ...     async def handle(self, query: GetRecentNewsQuery) -> list[NewsDTO]:
        ...         articles = await self._news_repo.find_recent(query.limit)
        ...         return [NewsDTO.from_entity(a) for a in articles]
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """Handle query and return result.

        Args:
            query: Query to handle.

        Returns:
            Query result (DTOs or primitives).

        Note:
            Queries MUST NOT have side effects.
        """
        pass
