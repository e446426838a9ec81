"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from stackit.domain.model.user import User
from stackit.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username (exact match)."""
        pass

    @abstractmethod
    async def find_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        """Find all users whose username is in ``usernames``.

        Unknown usernames are skipped; the result has no particular order.

        Args:
            usernames: Usernames to resolve

        Returns:
            Users that exist
        """
        pass

    @abstractmethod
    async def find_by_external_uid(self, external_uid: str) -> Optional[User]:
        """Find a user by the subject issued by the external identity provider."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
