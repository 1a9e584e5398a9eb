"""UserRepository Port - interface for user persistence."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import User
from ..value_objects import Email, UserId


class UserRepository(ABC):
    """Abstract interface for user persistence."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID.

        Returns:
            User entity or None if not found.
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        pass

    @abstractmethod
    async def exists(self, email: Email) -> bool:
        """Check whether a user with this email is already registered."""
        pass

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save user (create or update).

        Args:
            user: User entity to save.
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        pass
