"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from citadel.domain.model import Comment
from citadel.domain.repository import CommentRepository
from citadel.domain.value import CommentId, PostId
from citadel.persistence.mappers import comment_to_dict, row_to_comment
from citadel.persistence.tables import comments_id_seq, comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> CommentId:
        """Reserve the next comment identifier."""
        return CommentId(
            await self.session.scalar(select(comments_id_seq.next_value()))
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Create a comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        # A vanished post fails the FK check without aborting the transaction
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def reparent_children(
        self, comment_id: CommentId, new_parent_id: Optional[CommentId]
    ) -> int:
        """Point every direct reply of a comment at a new parent."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.parent_id == comment_id)
            .values(parent_id=new_parent_id)
        )
        result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a single comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
