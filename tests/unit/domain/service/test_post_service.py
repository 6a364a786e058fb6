"""Unit tests for PostService."""

import pytest

from citadel.domain.error import ForbiddenError, InvalidArgumentError, NotFoundError
from citadel.domain.repository import (
    CommentRepository,
    PostRepository,
    VoteRepository,
)
from citadel.domain.service import CommentService, PostService, VoteService
from citadel.domain.value import BoardName, PostId, UserId
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

ALICE = make_user(1, "alice")
BOB = make_user(2, "bob")


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_starts_at_zero(self, unit_env):
        """A new post should have score 0 and the given fields."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act
        post = await post_service.create_post(
            ALICE, "Winter is coming", "Prepare.", board="Lore"
        )

        # Assert
        assert post.score == 0
        assert post.title == "Winter is coming"
        assert post.board == BoardName("Lore")
        assert post.author_id == ALICE.id
        assert post.author_username == ALICE.username

    @pytest.mark.asyncio
    async def test_blank_board_uses_default(self, unit_env):
        """Posts without a board should land on the default board."""
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(ALICE, "Title", "Body", board="  ")

        assert post.board == BoardName("General")

    @pytest.mark.asyncio
    async def test_blank_link_is_stored_as_none(self, unit_env):
        """An empty link should not be stored."""
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(ALICE, "Title", "Body", link="")

        assert post.link is None

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, unit_env):
        """Title and content are required."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(InvalidArgumentError):
            await post_service.create_post(ALICE, " ", "Body")
        with pytest.raises(InvalidArgumentError):
            await post_service.create_post(ALICE, "Title", "")


class TestListPosts:
    """Tests for list_posts."""

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        """Posts should be listed newest first."""
        post_service = await unit_env.get(PostService)
        older = await post_service.create_post(ALICE, "Older", "Body")
        newer = await post_service.create_post(ALICE, "Newer", "Body")

        posts = await post_service.list_posts()

        assert [p.id for p in posts] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_board_filter_is_case_insensitive(self, unit_env):
        """Filtering by board should ignore case."""
        post_service = await unit_env.get(PostService)
        lore = await post_service.create_post(ALICE, "Lore", "Body", board="Lore")
        await post_service.create_post(ALICE, "General", "Body")

        posts = await post_service.list_posts(board="lore")

        assert [p.id for p in posts] == [lore.id]


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_author_can_update_title_only(self, unit_env):
        """Blank fields should be left unchanged."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(ALICE, "Old title", "Body")

        updated = await post_service.update_post(
            post.id, ALICE, title="New title", content=""
        )

        assert updated.title == "New title"
        assert updated.content == "Body"

    @pytest.mark.asyncio
    async def test_update_without_changes_returns_post(self, unit_env):
        """An update with nothing to change should be a no-op."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(ALICE, "Title", "Body")

        updated = await post_service.update_post(post.id, ALICE)

        assert updated == post

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(self, unit_env):
        """Another user should not be able to rewrite the post."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.create_post(ALICE, "Title", "Body")

        with pytest.raises(ForbiddenError):
            await post_service.update_post(post.id, BOB, title="Hijacked")

        stored = await post_repo.find_by_id(post.id)
        assert stored.title == "Title"

    @pytest.mark.asyncio
    async def test_update_missing_post_raises_not_found(self, unit_env):
        """Updating an unknown post should raise NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.update_post(PostId(42), ALICE, title="x")


class TestDeletePost:
    """Tests for delete_post cascade."""

    @pytest.mark.asyncio
    async def test_delete_removes_votes_and_comments(self, unit_env):
        """Deleting a post should leave no votes or comments behind."""
        # Arrange
        post_service = await unit_env.get(PostService)
        vote_service = await unit_env.get(VoteService)
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)

        post = await post_service.create_post(ALICE, "Doomed", "Body")
        other = await post_service.create_post(ALICE, "Survivor", "Body")
        await vote_service.cast_vote(UserId(1), post.id, 1)
        await vote_service.cast_vote(UserId(2), post.id, -1)
        await vote_service.cast_vote(UserId(2), other.id, 1)
        parent = await comment_service.add_comment(post.id, BOB, "Parent")
        await comment_service.add_comment(post.id, ALICE, "Reply", parent.id)
        await comment_service.add_comment(other.id, BOB, "Elsewhere")

        # Act
        await post_service.delete_post(post.id, ALICE)

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert await vote_repo.find_by_post(post.id) == []
        assert await comment_repo.find_by_post(post.id) == []
        assert len(await vote_repo.find_by_post(other.id)) == 1
        assert len(await comment_repo.find_by_post(other.id)) == 1

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        """Deleting someone else's post should be forbidden and change nothing."""
        post_service = await unit_env.get(PostService)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        post = await post_service.create_post(ALICE, "Mine", "Body")
        await vote_service.cast_vote(UserId(2), post.id, 1)

        with pytest.raises(ForbiddenError):
            await post_service.delete_post(post.id, BOB)

        assert await post_repo.find_by_id(post.id) is not None
        assert len(await vote_repo.find_by_post(post.id)) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises_not_found(self, unit_env):
        """Deleting an unknown post should raise NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId(7), ALICE)

    @pytest.mark.asyncio
    async def test_authorship_is_compared_by_username(self, unit_env):
        """A user with the author's name should count as the author."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(1, ALICE))
        same_name = make_user(99, "alice")

        await post_service.delete_post(PostId(1), same_name)

        assert await post_repo.find_by_id(PostId(1)) is None
