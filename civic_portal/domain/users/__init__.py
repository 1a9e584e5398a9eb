"""Users Bounded Context - Domain Layer.

Exports:
    Entities: User
    Value Objects: UserId, Email
    Repositories: UserRepository (interface)
"""

from .entities import User
from .repositories import UserRepository
from .value_objects import Email, UserId

__all__ = [
    # Entities
    "User",
    # Value Objects
    "UserId",
    "Email",
    # Repositories
    "UserRepository",
]
