"""Domain value objects for Citadel."""

from citadel.domain.value.identifiers import CommentId, PostId, UserId, VoteId
from citadel.domain.value.types import BoardName, Username, VoteOutcome

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "BoardName",
    "Username",
    "VoteOutcome",
]
