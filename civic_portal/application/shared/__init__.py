"""Shared Application Layer components."""

from .command import Command
from .handler import CommandHandler, QueryHandler
from .query import Query
from .result import UseCaseResult

__all__ = [
    "Command",
    "Query",
    "CommandHandler",
    "QueryHandler",
    "UseCaseResult",
]
