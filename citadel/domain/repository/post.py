"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from citadel.domain.model.post import Post
from citadel.domain.value import BoardName, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def next_id(self) -> PostId:
        """Reserve the next post identifier."""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID and lock its row until the transaction ends.

        Vote casting and post deletion take this lock so that score
        changes and cascades on one post are serialised.

        Args:
            post_id: The post's unique identifier

        Returns:
            The locked post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, board: Optional[BoardName] = None) -> List[Post]:
        """Find posts, newest first.

        Args:
            board: Only return posts on this board (case-insensitive)

        Returns:
            List of posts ordered by creation time descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Create a post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        post_id: PostId,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Post]:
        """Update the title and/or content of a post.

        Fields passed as None are left unchanged.

        Args:
            post_id: The post ID
            title: New title
            content: New content

        Returns:
            The updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def add_to_score(self, post_id: PostId, delta: int) -> int:
        """Atomically add ``delta`` to the post's score.

        Args:
            post_id: The post ID
            delta: Signed amount to add

        Returns:
            The new score
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete
        """
        pass
