"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from citadel.domain.model import User
from citadel.domain.repository import UserRepository
from citadel.domain.value import UserId, Username
from citadel.persistence.mappers import row_to_user, user_to_dict
from citadel.persistence.tables import users_id_seq, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> UserId:
        """Reserve the next user identifier."""
        return UserId(await self.session.scalar(select(users_id_seq.next_value())))

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their exact username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Create a user.

        Runs inside a savepoint so a duplicate username leaves the request
        transaction usable for the re-fetch.
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return user
