"""Project commands."""

from .update_project import UpdateProjectCommand, UpdateProjectError

__all__ = ["UpdateProjectCommand", "UpdateProjectError"]
