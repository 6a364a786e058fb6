"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from citadel.domain.model.comment import Comment
from citadel.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def next_id(self) -> CommentId:
        """Reserve the next comment identifier."""
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Comments ordered by creation time ascending, ID as tie-breaker
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment

        Raises:
            IntegrityError: If the post or parent no longer exists
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def reparent_children(
        self, comment_id: CommentId, new_parent_id: Optional[CommentId]
    ) -> int:
        """Point every direct reply of a comment at a new parent.

        Args:
            comment_id: The comment whose replies move
            new_parent_id: The new parent (None makes them top-level)

        Returns:
            Number of replies moved
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a single comment (hard delete).

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments deleted
        """
        pass
