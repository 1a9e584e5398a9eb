"""User commands."""

from .create_user import CreateUserCommand, CreateUserError

__all__ = ["CreateUserCommand", "CreateUserError"]
