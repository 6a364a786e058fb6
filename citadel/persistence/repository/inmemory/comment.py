"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from citadel.domain.model.comment import Comment
from citadel.domain.repository.comment import CommentRepository
from citadel.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def next_id(self) -> CommentId:
        """Reserve the next comment identifier."""
        return CommentId(next(self._ids))

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Create a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def reparent_children(
        self, comment_id: CommentId, new_parent_id: Optional[CommentId]
    ) -> int:
        """Point every direct reply of a comment at a new parent."""
        children = [c for c in self._comments.values() if c.parent_id == comment_id]
        for child in children:
            self._comments[child.id] = child.model_copy(
                update={"parent_id": new_parent_id}
            )
        return len(children)

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a single comment."""
        self._comments.pop(comment_id, None)

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
