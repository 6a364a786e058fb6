"""Vote entity.

Each user holds at most one vote per post. Casting the same value again
removes it and casting a different value replaces it.
"""

from datetime import datetime

from pydantic import Field, field_validator

from citadel.domain.model.common import DomainModel
from citadel.domain.value import PostId, UserId, VoteId

# Largest magnitude the votes.value column (int4) can hold
MAX_VOTE_MAGNITUDE = 2**31 - 1


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per post (enforced by database unique constraint)
    - ``value`` is a nonzero signed magnitude, usually +1 or -1, and at
      most ``MAX_VOTE_MAGNITUDE`` either way
    """

    id: VoteId
    user_id: UserId
    post_id: PostId
    value: int
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int) -> int:
        """Reject zero, which cannot be toggled, and out-of-range values."""
        if v == 0:
            raise ValueError("Vote value must be nonzero")
        if abs(v) > MAX_VOTE_MAGNITUDE:
            raise ValueError("Vote value out of range")
        return v
