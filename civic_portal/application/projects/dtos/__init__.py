"""Data Transfer Objects for the projects use cases."""

from .project_dto import ProjectDTO, ProjectListDTO, ProjectUpdateDTO

__all__ = ["ProjectDTO", "ProjectListDTO", "ProjectUpdateDTO"]
