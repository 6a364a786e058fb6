"""Comment entity ("mark").

Comments form a forest per post through ``parent_id``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from citadel.domain.model.common import DomainModel
from citadel.domain.value import CommentId, PostId, UserId, Username


class Comment(DomainModel):
    """Comment entity.

    A comment with ``parent_id`` of None is top-level. Otherwise the parent
    is a comment on the same post.
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    author_id: UserId
    author_username: Username  # Denormalized from users
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
