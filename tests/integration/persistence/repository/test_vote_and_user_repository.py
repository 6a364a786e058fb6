"""Integration tests for the savepoint-guarded inserts.

A unique violation on a vote or user insert must only undo that insert,
leaving the request transaction usable for the retry that follows.
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from citadel.domain.model import Post, User, Vote
from citadel.domain.repository import UserRepository, VoteRepository
from citadel.domain.value import Username
from tests.harness import create_env_fixture
from tests.integration.support import seed_post, seed_user

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence, needs postgres
integration_env = create_env_fixture(unmock={"persistence"})


async def _vote(vote_repo: VoteRepository, user: User, post: Post, value: int) -> Vote:
    return Vote(
        id=await vote_repo.next_id(), user_id=user.id, post_id=post.id, value=value
    )


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_keeps_transaction_usable(self, integration_env):
        """A second vote for the same (user, post) fails alone."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        voter = await seed_user(integration_env, "bran")
        post = await seed_post(integration_env, voter)
        await vote_repo.save(await _vote(vote_repo, voter, post, 1))

        # Act
        with pytest.raises(IntegrityError):
            await vote_repo.save(await _vote(vote_repo, voter, post, -1))

        # Assert - the first vote survives and the session still answers
        stored = await vote_repo.find_by_user_and_post(voter.id, post.id)
        assert stored is not None
        assert stored.value == 1

    @pytest.mark.asyncio
    async def test_update_and_delete_by_post(self, integration_env):
        """Votes can be switched in place and cleared per post."""
        vote_repo = await integration_env.get(VoteRepository)
        voter = await seed_user(integration_env, "bran")
        other = await seed_user(integration_env, "hodor")
        post = await seed_post(integration_env, voter)
        vote = await vote_repo.save(await _vote(vote_repo, voter, post, 1))
        await vote_repo.save(await _vote(vote_repo, other, post, 1))

        await vote_repo.update_value(vote.id, -3)
        switched = await vote_repo.find_by_user_and_post(voter.id, post.id)
        deleted = await vote_repo.delete_by_post(post.id)

        assert switched.value == -3
        assert deleted == 2
        assert await vote_repo.find_by_post(post.id) == []


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_username_keeps_transaction_usable(self, integration_env):
        """A taken username fails the insert without aborting the request."""
        user_repo = await integration_env.get(UserRepository)
        original = await seed_user(integration_env, "Anonymous")

        with pytest.raises(IntegrityError):
            await user_repo.save(
                User(
                    id=await user_repo.next_id(),
                    username=Username("Anonymous"),
                    password_hash="another-hash",
                    created_at=datetime.now(),
                )
            )

        found = await user_repo.find_by_username(Username("Anonymous"))
        assert found.id == original.id

    @pytest.mark.asyncio
    async def test_usernames_are_case_sensitive(self, integration_env):
        """Lookups should compare the stored name verbatim."""
        user_repo = await integration_env.get(UserRepository)
        await seed_user(integration_env, "Sansa")

        assert await user_repo.find_by_username(Username("sansa")) is None
        assert await user_repo.find_by_username(Username("Sansa")) is not None
