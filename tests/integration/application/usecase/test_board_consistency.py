"""Integration tests for vote and delete consistency on Postgres.

Each step runs in its own request scope, so it commits (or rolls back)
exactly like an HTTP request would. Assertions read committed rows on a
separate connection.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from citadel.domain.repository import CommentRepository
from citadel.domain.service import CommentService, PostService, VoteService
from citadel.persistence.repository import (
    PostgresPostRepository,
    PostgresVoteRepository,
)
from citadel.persistence.tables import comments_table, posts_table, votes_table
from tests.di import build_test_container
from tests.integration.support import (
    count_rows_for_post,
    seed_post,
    seed_user,
    stored_score_and_vote_sum,
)

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def container():
    """App container on real persistence; each ``container()`` is a request."""
    app_container = build_test_container(unmock={"persistence"})
    yield app_container
    await app_container.close()


class StaleReadVoteRepository(PostgresVoteRepository):
    """Vote repository whose first lookup misses an already committed vote."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.stale_reads = 1

    async def find_by_user_and_post(self, user_id, post_id):
        if self.stale_reads:
            self.stale_reads -= 1
            return None
        return await super().find_by_user_and_post(user_id, post_id)


class TestVoteLedgerIntegration:
    """Score and vote rows committed by the vote ledger."""

    @pytest.mark.asyncio
    async def test_toggle_and_switch_keep_score_equal_to_vote_sum(
        self, container, postgres
    ):
        """After every request the stored score should equal the vote sum."""
        # Arrange
        async with container() as request:
            arya = await seed_user(request, "arya")
            sansa = await seed_user(request, "sansa")
            post = await seed_post(request, arya)

        steps = [
            (arya, 1, (1, 1)),
            (sansa, 1, (2, 1)),
            (arya, 1, (1, 0)),  # toggle off
            (sansa, -1, (-1, -1)),  # switch
            (arya, -1, (-2, -1)),
            (sansa, -1, (-1, 0)),  # toggle off
        ]

        # Act / Assert
        for user, value, expected in steps:
            async with container() as request:
                vote_service = await request.get(VoteService)
                outcome = await vote_service.cast_vote(user.id, post.id, value)

            assert (outcome.score, outcome.user_vote) == expected
            score, total = await stored_score_and_vote_sum(postgres, post.id)
            assert score == total == expected[0]

    @pytest.mark.asyncio
    async def test_lost_duplicate_insert_recovers_in_one_transaction(
        self, container, postgres
    ):
        """A duplicate insert should roll back to its savepoint and toggle."""
        # Arrange - a vote committed by an earlier request
        async with container() as request:
            arya = await seed_user(request, "arya")
            post = await seed_post(request, arya)
            await (await request.get(VoteService)).cast_vote(arya.id, post.id, 1)

        # Act - this request misses that vote on its first read
        async with container() as request:
            session = await request.get(AsyncSession)
            vote_service = VoteService(
                vote_repository=StaleReadVoteRepository(session),
                post_repository=PostgresPostRepository(session),
            )
            outcome = await vote_service.cast_vote(arya.id, post.id, 1)

        # Assert
        assert (outcome.score, outcome.user_vote) == (0, 0)
        assert await stored_score_and_vote_sum(postgres, post.id) == (0, 0)
        assert await count_rows_for_post(postgres, votes_table, post.id) == 0

    @pytest.mark.asyncio
    async def test_failure_after_vote_insert_rolls_back_request(
        self, container, postgres
    ):
        """An error late in a request should undo both vote and score."""
        async with container() as request:
            arya = await seed_user(request, "arya")
            post = await seed_post(request, arya)

        # The container may wrap the error while running its finalizers
        with pytest.raises(Exception) as raised:
            async with container() as request:
                vote_service = await request.get(VoteService)
                outcome = await vote_service.cast_vote(arya.id, post.id, 1)
                assert outcome.score == 1
                raise RuntimeError("connection lost")

        assert "connection lost" in repr(raised.value)
        assert await stored_score_and_vote_sum(postgres, post.id) == (0, 0)
        assert await count_rows_for_post(postgres, votes_table, post.id) == 0


class TestPostDeletionIntegration:
    """Cascading post deletion on Postgres."""

    @pytest.mark.asyncio
    async def test_delete_post_removes_votes_and_comment_forest(
        self, container, postgres
    ):
        """Nothing that referenced the post should remain afterwards."""
        # Arrange
        async with container() as request:
            arya = await seed_user(request, "arya")
            sansa = await seed_user(request, "sansa")
            post = await seed_post(request, arya)
            other = await seed_post(request, sansa)
            vote_service = await request.get(VoteService)
            comment_service = await request.get(CommentService)
            await vote_service.cast_vote(arya.id, post.id, 1)
            await vote_service.cast_vote(sansa.id, post.id, -1)
            await vote_service.cast_vote(sansa.id, other.id, 1)
            root = await comment_service.add_comment(post.id, sansa, "Root")
            reply = await comment_service.add_comment(post.id, arya, "Re", root.id)
            await comment_service.add_comment(post.id, sansa, "Re re", reply.id)
            await comment_service.add_comment(other.id, arya, "Elsewhere")

        # Act
        async with container() as request:
            post_service = await request.get(PostService)
            await post_service.delete_post(post.id, arya)

        # Assert
        for table in (posts_table, votes_table, comments_table):
            assert await count_rows_for_post(postgres, table, post.id) == 0
        assert await stored_score_and_vote_sum(postgres, other.id) == (1, 1)
        async with container() as request:
            comment_repo = await request.get(CommentRepository)
            assert len(await comment_repo.find_by_post(other.id)) == 1
