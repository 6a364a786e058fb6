"""In-memory user repository for testing."""

from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from citadel.domain.model.user import User
from citadel.domain.repository.user import UserRepository
from citadel.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def next_id(self) -> UserId:
        """Reserve the next user identifier."""
        return UserId(next(self._ids))

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their exact username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Create a user.

        Raises:
            IntegrityError: If the username is already taken
        """
        if any(u.username == user.username for u in self._users.values()):
            raise IntegrityError("Duplicate username", None, Exception())

        self._users[user.id] = user
        return user
