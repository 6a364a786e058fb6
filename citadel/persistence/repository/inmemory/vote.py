"""In-memory vote repository for testing."""

from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from citadel.domain.model.vote import Vote
from citadel.domain.repository.vote import VoteRepository
from citadel.domain.value import PostId, UserId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._ids = count(1)

    async def next_id(self) -> VoteId:
        """Reserve the next vote identifier."""
        return VoteId(next(self._ids))

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a vote by user and post."""
        for vote in self._votes:
            if vote.user_id == user_id and vote.post_id == post_id:
                return vote
        return None

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all votes for a post."""
        return [v for v in self._votes if v.post_id == post_id]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        if any(
            v.user_id == vote.user_id and v.post_id == vote.post_id
            for v in self._votes
        ):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_value(self, vote_id: VoteId, value: int) -> None:
        """Change the value of an existing vote."""
        self._votes = [
            v.model_copy(update={"value": value}) if v.id == vote_id else v
            for v in self._votes
        ]

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self._votes = [v for v in self._votes if v.id != vote_id]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.post_id != post_id]
        return before - len(self._votes)
