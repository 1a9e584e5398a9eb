"""CreateUser Command - register a new user."""

from dataclasses import dataclass
from enum import Enum

from civic_portal.application.shared import Command


class CreateUserError(str, Enum):
    """Expected failures of CreateUser."""

    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_NAME = "INVALID_NAME"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"


@dataclass(frozen=True)
class CreateUserCommand(Command):
    """Command to register a user.

    Example:
        >>> result = await handler.handle(
        ...     CreateUserCommand(email="ada@example.org", name="  Ada  ")
        ... )
        >>> result.value.name
        'Ada'
    """

    email: str
    name: str
