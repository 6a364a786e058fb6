"""Vote domain service.

Keeps at most one vote per (user, post) and the post's score equal to
the sum of its votes.
"""

import logfire
from sqlalchemy.exc import IntegrityError

from citadel.domain.error import InvalidArgumentError, NotFoundError
from citadel.domain.model.vote import MAX_VOTE_MAGNITUDE, Vote
from citadel.domain.repository import PostRepository, VoteRepository
from citadel.domain.value import PostId, UserId, VoteOutcome

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_repository: Post repository (row lock and score updates)
        """
        self.vote_repository = vote_repository
        self.post_repository = post_repository

    async def cast_vote(
        self, user_id: UserId, post_id: PostId, value: int
    ) -> VoteOutcome:
        """Cast a vote on a post with toggle/switch semantics.

        - No existing vote: the vote is created and added to the score.
        - Same value again: the vote is removed (toggle off).
        - Different value: the vote is replaced and the score moves by
          the difference (switch).

        The post row stays locked until the surrounding transaction ends,
        so the vote row and the score change commit together.

        Args:
            user_id: Voting user
            post_id: Post voted on
            value: Nonzero signed vote value

        Returns:
            New score and the user's effective vote (0 after a toggle-off)

        Raises:
            InvalidArgumentError: If value is 0 or out of range
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "vote_service.cast_vote", post_id=post_id, user_id=user_id, value=value
        ):
            if value == 0:
                raise InvalidArgumentError("Vote value must be nonzero")
            if abs(value) > MAX_VOTE_MAGNITUDE:
                raise InvalidArgumentError(
                    f"Vote value must be between {-MAX_VOTE_MAGNITUDE} "
                    f"and {MAX_VOTE_MAGNITUDE}"
                )

            post = await self.post_repository.find_by_id_for_update(post_id)
            if post is None:
                logfire.warn("Vote on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            existing = await self.vote_repository.find_by_user_and_post(
                user_id, post_id
            )
            if existing is None:
                vote = Vote(
                    id=await self.vote_repository.next_id(),
                    user_id=user_id,
                    post_id=post_id,
                    value=value,
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    # Another request inserted first; treat ours as a repeat
                    logfire.warn(
                        "Duplicate vote insert, retrying against stored vote",
                        user_id=user_id,
                        post_id=post_id,
                    )
                    existing = await self.vote_repository.find_by_user_and_post(
                        user_id, post_id
                    )
                    if existing is None:
                        raise
                else:
                    score = await self.post_repository.add_to_score(post_id, value)
                    logfire.info(
                        "Vote created", post_id=post_id, user_id=user_id, score=score
                    )
                    return VoteOutcome(score=score, user_vote=value)

            return await self._apply_to_existing(existing, value)

    async def _apply_to_existing(self, existing: Vote, value: int) -> VoteOutcome:
        """Toggle off or switch an existing vote."""
        if existing.value == value:
            await self.vote_repository.delete(existing.id)
            score = await self.post_repository.add_to_score(
                existing.post_id, -existing.value
            )
            logfire.info(
                "Vote toggled off",
                post_id=existing.post_id,
                user_id=existing.user_id,
                score=score,
            )
            return VoteOutcome(score=score, user_vote=0)

        await self.vote_repository.update_value(existing.id, value)
        score = await self.post_repository.add_to_score(
            existing.post_id, value - existing.value
        )
        logfire.info(
            "Vote switched",
            post_id=existing.post_id,
            user_id=existing.user_id,
            old_value=existing.value,
            new_value=value,
            score=score,
        )
        return VoteOutcome(score=score, user_vote=value)

    async def user_vote_for(self, user_id: UserId, post_id: PostId) -> int:
        """Get a user's current vote on a post.

        Args:
            user_id: User ID
            post_id: Post ID

        Returns:
            The vote value, or 0 if the user hasn't voted
        """
        vote = await self.vote_repository.find_by_user_and_post(user_id, post_id)
        return vote.value if vote else 0

    async def clear_votes(self, post_id: PostId) -> int:
        """Delete every vote on a post.

        Callers must hold the post row lock and remove the post in the same
        transaction, since the score is not adjusted.

        Args:
            post_id: Post ID

        Returns:
            Number of votes deleted
        """
        with logfire.span("vote_service.clear_votes", post_id=post_id):
            deleted = await self.vote_repository.delete_by_post(post_id)
            logfire.info("Votes cleared", post_id=post_id, count=deleted)
            return deleted
