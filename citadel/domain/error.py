"""Domain layer errors.

Every error carries an ``ErrorKind`` so the interface layer can map it to
a distinct status without inspecting messages.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Externally observable category of a failure."""

    INVALID_ARGUMENT = "invalid_argument"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.INTERNAL


class InvalidArgumentError(DomainError):
    """Raised for malformed input, such as a zero vote value."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidCredentialsError(DomainError):
    """Raised when a username/password pair does not match."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class ForbiddenError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, resource: str, resource_id: int, username: str):
        self.resource = resource
        self.resource_id = resource_id
        self.username = username
        super().__init__(
            f"User {username} is not the author of {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a unique key is already taken."""

    kind = ErrorKind.CONFLICT
