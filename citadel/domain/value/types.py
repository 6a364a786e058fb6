"""Domain value objects for Citadel.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from pydantic import field_validator

from citadel.domain.value.common import RootValueObject, ValueObject


class Username(RootValueObject[str]):
    """Display name of a user.

    Usernames are the only identity the clients send, so they are compared
    verbatim (case-sensitive) everywhere, including authorship checks.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Username must not be blank")
        if len(v) > 255:
            raise ValueError("Username must be at most 255 characters")
        return v


class BoardName(RootValueObject[str]):
    """Category label grouping posts, e.g. 'General' or 'Lore'."""

    @field_validator("root")
    @classmethod
    def validate_board_name(cls, v: str) -> str:
        """Validate board name length."""
        if not v.strip() or len(v) > 100:
            raise ValueError("Board name must be 1-100 characters")
        return v

    def matches(self, other: str) -> bool:
        """Case-insensitive comparison used by board filtering."""
        return self.root.casefold() == other.casefold()


class VoteOutcome(ValueObject):
    """Result of casting a vote.

    ``user_vote`` is the caller's effective vote after the operation:
    0 after a toggle-off, otherwise the value that was cast.
    """

    score: int
    user_vote: int
