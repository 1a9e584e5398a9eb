"""Base Command class for the CQRS pattern.

Command - a request to change system state (write operation).
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Command(ABC):
    """Base class for all commands.

    Command characteristics:
    - **Immutable**: frozen=True prevents changes
    - **Intent**: Names the action (UpdateProjectCommand, CreateUserCommand)
    - **Primitive payload**: Raw input from the caller; handlers build value objects

    Example:
        >>> @dataclass(frozen=True)
        ... class UpdateProjectCommand(Command):
        ...     project_id: str
        ...     status: str | None = None

        >>> command = UpdateProjectCommand(project_id="...", status="completed")
        >>> result = await handler.handle(command)
    """

    pass
