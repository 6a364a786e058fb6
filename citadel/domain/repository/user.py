"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from citadel.domain.model.user import User
from citadel.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def next_id(self) -> UserId:
        """Reserve the next user identifier."""
        pass

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
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their exact username.

        Args:
            username: The user's display name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create a user.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the username is already taken
        """
        pass
