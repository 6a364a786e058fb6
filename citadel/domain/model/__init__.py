"""Domain model entities for Citadel."""

from citadel.domain.model.comment import Comment
from citadel.domain.model.post import Post
from citadel.domain.model.user import User
from citadel.domain.model.vote import Vote

__all__ = [
    "User",
    "Post",
    "Comment",
    "Vote",
]
