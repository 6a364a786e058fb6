"""PostgreSQL repository implementations."""

from citadel.persistence.repository.comment import PostgresCommentRepository
from citadel.persistence.repository.post import PostgresPostRepository
from citadel.persistence.repository.user import PostgresUserRepository
from citadel.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
