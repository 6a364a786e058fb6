"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from citadel.domain.model import Vote
from citadel.domain.repository import VoteRepository
from citadel.domain.value import PostId, UserId, VoteId
from citadel.persistence.mappers import row_to_vote, vote_to_dict
from citadel.persistence.tables import votes_id_seq, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> VoteId:
        """Reserve the next vote identifier."""
        return VoteId(await self.session.scalar(select(votes_id_seq.next_value())))

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post."""
        stmt = select(votes_table).where(votes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The insert runs inside a savepoint so a unique violation can be
        retried as a toggle/switch within the same transaction.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def update_value(self, vote_id: VoteId, value: int) -> None:
        """Change the value of an existing vote."""
        stmt = (
            update(votes_table).where(votes_table.c.id == vote_id).values(value=value)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post."""
        stmt = delete(votes_table).where(votes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
