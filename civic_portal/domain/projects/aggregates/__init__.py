"""Project aggregates."""

from .project_aggregate import ProjectAggregate

__all__ = ["ProjectAggregate"]
