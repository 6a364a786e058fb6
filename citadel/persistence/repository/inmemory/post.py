"""In-memory post repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from citadel.domain.model.post import Post
from citadel.domain.repository.post import PostRepository
from citadel.domain.value import BoardName, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Row locks are no-ops: tests drive one coroutine at a time.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    async def next_id(self) -> PostId:
        """Reserve the next post identifier."""
        return PostId(next(self._ids))

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, board: Optional[BoardName] = None) -> list[Post]:
        """Find posts newest first, optionally on one board."""
        posts = list(self._posts.values())

        if board is not None:
            posts = [p for p in posts if board.matches(p.board.root)]

        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return posts

    async def save(self, post: Post) -> Post:
        """Create a post."""
        self._posts[post.id] = post
        return post

    async def update_content(
        self,
        post_id: PostId,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Post]:
        """Update title and/or content, leaving None fields untouched."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        changes: dict[str, object] = {"updated_at": datetime.now()}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content

        updated = post.model_copy(update=changes)
        self._posts[post_id] = updated
        return updated

    async def add_to_score(self, post_id: PostId, delta: int) -> int:
        """Add delta to the score."""
        post = self._posts[post_id]
        updated = post.model_copy(update={"score": post.score + delta})
        self._posts[post_id] = updated
        return updated.score

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)
