"""Comment domain service."""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime

import logfire
from sqlalchemy.exc import IntegrityError

from citadel.domain.error import ForbiddenError, InvalidArgumentError, NotFoundError
from citadel.domain.model import Comment, User
from citadel.domain.repository import CommentRepository, PostRepository
from citadel.domain.value import CommentId, PostId

from .base import Service


@dataclass
class CommentNode:
    """Node in a post's comment forest.

    Holds a comment and its direct replies, oldest first.
    """

    comment: Comment
    depth: int
    children: list["CommentNode"] = field(default_factory=list)


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (existence checks)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def add_comment(
        self,
        post_id: PostId,
        author: User,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author: Resolved author
            content: Comment body
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            InvalidArgumentError: If content is blank or the parent is
                missing or belongs to another post
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=post_id,
            author_id=author.id,
            parent_id=parent_id,
        ):
            if not content.strip():
                raise InvalidArgumentError("Comment content must not be empty")

            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Comment on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    raise InvalidArgumentError(
                        f"Parent comment not found: {parent_id}"
                    )
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise InvalidArgumentError(
                        "Parent comment does not belong to this post"
                    )

            now = datetime.now()
            comment = Comment(
                id=await self.comment_repository.next_id(),
                post_id=post_id,
                parent_id=parent_id,
                author_id=author.id,
                author_username=author.username,
                content=content,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.comment_repository.save(comment)
            except IntegrityError:
                # Post or parent was deleted between the check and the insert
                await self._raise_for_vanished_target(post_id, parent_id)
                raise

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                author=str(author.username),
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", comment_id)
        return comment

    async def update_comment(
        self, comment_id: CommentId, actor: User, content: str
    ) -> Comment:
        """Replace the content of a comment.

        Only the author, compared by username, may edit.

        Args:
            comment_id: Comment ID
            actor: User performing the edit
            content: New content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the actor is not the author
            InvalidArgumentError: If content is blank
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment_id,
            actor=str(actor.username),
        ):
            comment = await self.get_comment_by_id(comment_id)
            self._check_author(comment, actor)

            if not content.strip():
                raise InvalidArgumentError("Comment content must not be empty")

            updated = await self.comment_repository.update_content(
                comment_id, content
            )
            if updated is None:
                raise NotFoundError("Comment", comment_id)

            logfire.info(
                "Comment updated", comment_id=comment_id, post_id=updated.post_id
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, actor: User) -> None:
        """Delete a single comment.

        Direct replies are moved up to the deleted comment's parent, so the
        forest never holds a reply whose parent is gone.

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the actor is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            actor=str(actor.username),
        ):
            comment = await self.get_comment_by_id(comment_id)
            self._check_author(comment, actor)

            moved = await self.comment_repository.reparent_children(
                comment_id, comment.parent_id
            )
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                post_id=comment.post_id,
                replies_moved=moved,
            )

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Each comment carries its ``parent_id`` so callers can rebuild the
        forest, or use ``build_thread``.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            if await self.post_repository.find_by_id(post_id) is None:
                raise NotFoundError("Post", post_id)

            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def delete_comments_for_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Returns:
            Number of comments deleted
        """
        with logfire.span("comment_service.delete_comments_for_post", post_id=post_id):
            deleted = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Comments cleared", post_id=post_id, count=deleted)
            return deleted

    @staticmethod
    def build_thread(comments: list[Comment]) -> list[CommentNode]:
        """Build the comment forest for a post.

        Algorithm:
        1. Build adjacency map of parent_id -> [comments] in one pass
        2. Roots are comments without a parent, or whose parent is not in
           the given list
        3. Walk the map breadth-first, attaching replies oldest first

        The walk uses an explicit queue, so arbitrarily deep reply chains
        are fine.

        Args:
            comments: Comments of a single post

        Returns:
            Root nodes with children populated
        """
        known_ids = {c.id for c in comments}
        ordered = sorted(comments, key=lambda c: (c.created_at, c.id))

        adjacency: dict[CommentId, list[Comment]] = defaultdict(list)
        roots: list[CommentNode] = []
        for comment in ordered:
            if comment.parent_id is None or comment.parent_id not in known_ids:
                roots.append(CommentNode(comment=comment, depth=0))
            else:
                adjacency[comment.parent_id].append(comment)

        pending = deque(roots)
        while pending:
            node = pending.popleft()
            for child in adjacency.get(node.comment.id, []):
                child_node = CommentNode(comment=child, depth=node.depth + 1)
                node.children.append(child_node)
                pending.append(child_node)

        return roots

    async def _raise_for_vanished_target(
        self, post_id: PostId, parent_id: CommentId | None
    ) -> None:
        if await self.post_repository.find_by_id(post_id) is None:
            logfire.warn("Comment target vanished", post_id=post_id)
            raise NotFoundError("Post", post_id)
        if (
            parent_id is not None
            and await self.comment_repository.find_by_id(parent_id) is None
        ):
            logfire.warn(
                "Parent comment vanished", parent_id=parent_id, post_id=post_id
            )
            raise InvalidArgumentError(f"Parent comment not found: {parent_id}")

    @staticmethod
    def _check_author(comment: Comment, actor: User) -> None:
        if comment.author_username != actor.username:
            logfire.warn(
                "Non-author attempted to change comment",
                comment_id=comment.id,
                actor=str(actor.username),
            )
            raise ForbiddenError("comment", comment.id, str(actor.username))
