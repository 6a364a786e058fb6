"""Response views shared by several use cases.

Views are plain pydantic models built from domain entities; they never
expose password hashes.
"""

from datetime import datetime

from pydantic import BaseModel

from citadel.domain.model import Comment, Post, User
from citadel.domain.service import CommentNode


class UserView(BaseModel):
    """Public view of a user."""

    id: int
    username: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        return cls(id=user.id, username=user.username.root, created_at=user.created_at)


class PostView(BaseModel):
    """Public view of a post."""

    id: int
    title: str
    content: str
    board: str
    link: str | None
    author_id: int
    author_username: str
    score: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostView":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            board=post.board.root,
            link=post.link,
            author_id=post.author_id,
            author_username=post.author_username.root,
            score=post.score,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CommentView(BaseModel):
    """Public view of a comment.

    ``parent_id`` is enough for clients to rebuild the thread themselves.
    """

    id: int
    post_id: int
    parent_id: int | None
    author_id: int
    author_username: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentView":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            author_id=comment.author_id,
            author_username=comment.author_username.root,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


# Nesting deeper than this is cut from the thread view; the flat list
# still carries every comment.
THREAD_DEPTH_LIMIT = 64


class CommentThreadView(BaseModel):
    """A comment with its nested replies.

    ``replies_hidden`` is set when the node sits at the depth limit and its
    replies were left out of ``children``.
    """

    comment: CommentView
    depth: int
    children: list["CommentThreadView"]
    replies_hidden: bool = False

    @classmethod
    def from_node(
        cls, node: CommentNode, max_depth: int = THREAD_DEPTH_LIMIT
    ) -> "CommentThreadView":
        """Convert a comment node and its replies, down to ``max_depth``."""
        root = cls._leaf(node)
        pending = [(node, root)]
        while pending:
            source, view = pending.pop()
            if source.depth - node.depth >= max_depth:
                view.replies_hidden = bool(source.children)
                continue
            for child in source.children:
                child_view = cls._leaf(child)
                view.children.append(child_view)
                pending.append((child, child_view))
        return root

    @classmethod
    def _leaf(cls, node: CommentNode) -> "CommentThreadView":
        return cls(
            comment=CommentView.from_domain(node.comment),
            depth=node.depth,
            children=[],
        )
