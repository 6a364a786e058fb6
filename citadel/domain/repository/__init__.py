"""Repository interfaces for Citadel domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from citadel.domain.repository.comment import CommentRepository
from citadel.domain.repository.post import PostRepository
from citadel.domain.repository.user import UserRepository
from citadel.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
]
