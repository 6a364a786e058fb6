"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from citadel.domain.model.vote import Vote
from citadel.domain.value import PostId, UserId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def next_id(self) -> VoteId:
        """Reserve the next vote identifier."""
        pass

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post.

        Args:
            post_id: The post's ID

        Returns:
            List of votes on the post
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        This raises if a vote already exists for this user/post
        combination (unique constraint violation). A failed insert must
        leave the surrounding transaction usable.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        pass

    @abstractmethod
    async def update_value(self, vote_id: VoteId, value: int) -> None:
        """Change the value of an existing vote.

        Args:
            vote_id: The vote ID
            value: New nonzero value
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of votes deleted
        """
        pass
