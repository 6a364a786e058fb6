"""Post aggregate root ("scroll")."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from citadel.domain.model.common import DomainModel
from citadel.domain.value import BoardName, PostId, UserId, Username


class Post(DomainModel):
    """Post aggregate root.

    ``score`` is the sum of all vote values cast on the post and is only
    ever changed together with the vote rows it summarises.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=40000)
    board: BoardName
    link: Optional[str] = None
    author_id: UserId
    author_username: Username  # Denormalized from users
    score: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
