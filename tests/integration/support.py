"""Helpers shared by the Postgres integration tests."""

from datetime import datetime

from dishka import AsyncContainer
from sqlalchemy import Table, func, select
from sqlalchemy.ext.asyncio import AsyncEngine

from citadel.domain.model import Post, User
from citadel.domain.repository import PostRepository, UserRepository
from citadel.domain.value import Username
from citadel.persistence.tables import posts_table, votes_table
from tests.conftest import make_post


async def seed_user(container: AsyncContainer, username: str) -> User:
    """Store a registered user with a sequence-assigned id."""
    user_repo = await container.get(UserRepository)
    return await user_repo.save(
        User(
            id=await user_repo.next_id(),
            username=Username(username),
            password_hash="not-a-real-hash",
            created_at=datetime.now(),
        )
    )


async def seed_post(container: AsyncContainer, author: User) -> Post:
    """Store a post by ``author`` with a sequence-assigned id."""
    post_repo = await container.get(PostRepository)
    return await post_repo.save(make_post(await post_repo.next_id(), author))


async def stored_score_and_vote_sum(
    engine: AsyncEngine, post_id: int
) -> tuple[int | None, int]:
    """Read a post's cached score and the sum of its vote rows.

    Runs on its own connection, so it only sees committed data.
    """
    async with engine.connect() as conn:
        score = await conn.scalar(
            select(posts_table.c.score).where(posts_table.c.id == post_id)
        )
        total = await conn.scalar(
            select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
                votes_table.c.post_id == post_id
            )
        )
    return score, total


async def count_rows_for_post(engine: AsyncEngine, table: Table, post_id: int) -> int:
    """Count committed rows of ``table`` that belong to a post."""
    column = table.c.id if table is posts_table else table.c.post_id
    async with engine.connect() as conn:
        return await conn.scalar(
            select(func.count()).select_from(table).where(column == post_id)
        )
