"""Data Transfer Objects for the user use cases."""

from .user_dto import UserDTO

__all__ = ["UserDTO"]
