"""User use case handlers."""

from .create_user_handler import CreateUserHandler

__all__ = ["CreateUserHandler"]
