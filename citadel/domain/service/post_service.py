"""Post domain service."""

from datetime import datetime

import logfire

from citadel.config import BoardSettings
from citadel.domain.error import ForbiddenError, InvalidArgumentError, NotFoundError
from citadel.domain.model import Post, User
from citadel.domain.repository import PostRepository
from citadel.domain.value import BoardName, PostId

from .base import Service
from .comment_service import CommentService
from .vote_service import VoteService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        vote_service: VoteService,
        comment_service: CommentService,
        board_settings: BoardSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            vote_service: Vote domain service (cascade on delete)
            comment_service: Comment domain service (cascade on delete)
            board_settings: Default board configuration
        """
        self.post_repository = post_repository
        self.vote_service = vote_service
        self.comment_service = comment_service
        self.board_settings = board_settings

    async def create_post(
        self,
        author: User,
        title: str,
        content: str,
        board: str | None = None,
        link: str | None = None,
    ) -> Post:
        """Create a post with a score of 0.

        Args:
            author: Resolved author
            title: Post title
            content: Post body
            board: Board label, the default board when blank
            link: Optional external link

        Returns:
            Created post

        Raises:
            InvalidArgumentError: If title or content is blank
        """
        with logfire.span(
            "post_service.create_post", author_id=author.id, title=title, board=board
        ):
            if not title.strip() or not content.strip():
                raise InvalidArgumentError("title and content are required")

            board_name = BoardName(
                board.strip()
                if board and board.strip()
                else self.board_settings.default_board
            )
            now = datetime.now()
            post = Post(
                id=await self.post_repository.next_id(),
                title=title,
                content=content,
                board=board_name,
                link=link.strip() if link and link.strip() else None,
                author_id=author.id,
                author_username=author.username,
                score=0,
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=saved.id, board=board_name.root)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)

            return post

    async def list_posts(self, board: str | None = None) -> list[Post]:
        """List posts, newest first.

        Args:
            board: Optional board filter, matched case-insensitively

        Returns:
            Matching posts
        """
        with logfire.span("post_service.list_posts", board=board):
            board_name = BoardName(board.strip()) if board and board.strip() else None
            posts = await self.post_repository.find_all(board=board_name)
            logfire.info("Posts listed", board=board, count=len(posts))
            return posts

    async def update_post(
        self,
        post_id: PostId,
        actor: User,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        """Update a post's title and/or content.

        Only the author, compared by username, may edit. Blank fields are
        left unchanged.

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the actor is not the author
        """
        with logfire.span(
            "post_service.update_post", post_id=post_id, actor=str(actor.username)
        ):
            post = await self.get_post_by_id(post_id)
            self._check_author(post, actor)

            new_title = title if title and title.strip() else None
            new_content = content if content and content.strip() else None
            if new_title is None and new_content is None:
                logfire.info("Post update with no changes", post_id=post_id)
                return post

            updated = await self.post_repository.update_content(
                post_id, title=new_title, content=new_content
            )
            if updated is None:
                raise NotFoundError("Post", post_id)

            logfire.info("Post updated", post_id=post_id)
            return updated

    async def delete_post(self, post_id: PostId, actor: User) -> None:
        """Delete a post with all its votes and comments.

        The post row is locked first, so concurrent votes wait and then see
        the post gone. All three deletions share the request transaction.

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the actor is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=post_id, actor=str(actor.username)
        ):
            post = await self.post_repository.find_by_id_for_update(post_id)
            if post is None:
                logfire.warn("Delete of non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id)
            self._check_author(post, actor)

            votes = await self.vote_service.clear_votes(post_id)
            comments = await self.comment_service.delete_comments_for_post(post_id)
            await self.post_repository.delete(post_id)

            logfire.info(
                "Post deleted",
                post_id=post_id,
                votes_deleted=votes,
                comments_deleted=comments,
            )

    @staticmethod
    def _check_author(post: Post, actor: User) -> None:
        if post.author_username != actor.username:
            logfire.warn(
                "Non-author attempted to change post",
                post_id=post.id,
                actor=str(actor.username),
            )
            raise ForbiddenError("post", post.id, str(actor.username))
