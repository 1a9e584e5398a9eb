"""Users application layer."""

from .commands import CreateUserCommand, CreateUserError
from .dtos import UserDTO
from .handlers import CreateUserHandler

__all__ = ["CreateUserCommand", "CreateUserError", "UserDTO", "CreateUserHandler"]
