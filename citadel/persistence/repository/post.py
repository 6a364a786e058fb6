"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from citadel.domain.model import Post
from citadel.domain.repository.post import PostRepository
from citadel.domain.value import BoardName, PostId
from citadel.persistence.mappers import post_to_dict, row_to_post
from citadel.persistence.tables import posts_id_seq, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> PostId:
        """Reserve the next post identifier."""
        return PostId(await self.session.scalar(select(posts_id_seq.next_value())))

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID holding a row lock (SELECT ... FOR UPDATE)."""
        with logfire.span("post_repository.find_by_id_for_update", post_id=post_id):
            stmt = (
                select(posts_table)
                .where(posts_table.c.id == post_id)
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_all(self, board: Optional[BoardName] = None) -> List[Post]:
        """Find posts newest first, optionally on one board."""
        with logfire.span(
            "post_repository.find_all", board=board.root if board else None
        ):
            stmt = select(posts_table)

            # Board labels are matched case-insensitively
            if board is not None:
                stmt = stmt.where(
                    func.lower(posts_table.c.board) == board.root.lower()
                )

            stmt = stmt.order_by(
                desc(posts_table.c.created_at), desc(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Create a post."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def update_content(
        self,
        post_id: PostId,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Post]:
        """Update title and/or content, leaving None fields untouched."""
        values: dict[str, object] = {"updated_at": datetime.now()}
        if title is not None:
            values["title"] = title
        if content is not None:
            values["content"] = content

        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(**values)
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def add_to_score(self, post_id: PostId, delta: int) -> int:
        """Atomically add delta to the score (SQL-level increment)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(score=posts_table.c.score + delta)
            .returning(posts_table.c.score)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()
