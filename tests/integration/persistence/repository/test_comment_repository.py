"""Integration tests for PostgresCommentRepository."""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from citadel.domain.model import Comment, User
from citadel.domain.repository import CommentRepository
from citadel.domain.service import CommentService
from citadel.domain.value import CommentId, PostId
from tests.harness import create_env_fixture
from tests.integration.support import seed_post, seed_user

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence, needs postgres
integration_env = create_env_fixture(unmock={"persistence"})


async def _comment(
    comment_repo: CommentRepository,
    post_id: PostId,
    author: User,
    parent_id: CommentId | None = None,
) -> Comment:
    return await comment_repo.save(
        Comment(
            id=await comment_repo.next_id(),
            post_id=post_id,
            parent_id=parent_id,
            author_id=author.id,
            author_username=author.username,
            content="A mark",
            created_at=datetime.now(),
            updated_at=datetime.now(),
        )
    )


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_reparent_children_moves_direct_replies_only(self, integration_env):
        """Only the direct replies should move to the new parent."""
        # Arrange - root <- middle <- (leaf_a, leaf_b) <- deep
        comment_repo = await integration_env.get(CommentRepository)
        author = await seed_user(integration_env, "jon")
        post = await seed_post(integration_env, author)
        root = await _comment(comment_repo, post.id, author)
        middle = await _comment(comment_repo, post.id, author, root.id)
        leaf_a = await _comment(comment_repo, post.id, author, middle.id)
        leaf_b = await _comment(comment_repo, post.id, author, middle.id)
        deep = await _comment(comment_repo, post.id, author, leaf_a.id)

        # Act
        moved = await comment_repo.reparent_children(middle.id, root.id)

        # Assert
        assert moved == 2
        parents = {c.id: c.parent_id for c in await comment_repo.find_by_post(post.id)}
        assert parents[leaf_a.id] == root.id
        assert parents[leaf_b.id] == root.id
        assert parents[deep.id] == leaf_a.id

    @pytest.mark.asyncio
    async def test_delete_comment_leaves_no_dangling_reply(self, integration_env):
        """Deleting a middle comment should hand its replies to its parent."""
        comment_service = await integration_env.get(CommentService)
        author = await seed_user(integration_env, "jon")
        post = await seed_post(integration_env, author)
        root = await comment_service.add_comment(post.id, author, "Root")
        middle = await comment_service.add_comment(post.id, author, "Mid", root.id)
        leaf = await comment_service.add_comment(post.id, author, "Leaf", middle.id)

        await comment_service.delete_comment(middle.id, author)

        comments = await comment_service.get_comments_for_post(post.id)
        assert [c.id for c in comments] == [root.id, leaf.id]
        assert comments[1].parent_id == root.id

    @pytest.mark.asyncio
    async def test_insert_for_missing_post_keeps_transaction_usable(
        self, integration_env
    ):
        """A foreign key failure should only undo the failed insert."""
        comment_repo = await integration_env.get(CommentRepository)
        author = await seed_user(integration_env, "jon")
        post = await seed_post(integration_env, author)
        kept = await _comment(comment_repo, post.id, author)

        with pytest.raises(IntegrityError):
            await _comment(comment_repo, PostId(987654), author)

        assert [c.id for c in await comment_repo.find_by_post(post.id)] == [kept.id]
