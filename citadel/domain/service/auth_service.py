"""Authentication domain service.

Username/password registration and login. There are no sessions or
tokens: clients keep the returned username and send it with each write.
"""

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from citadel.config import IdentitySettings
from citadel.domain.error import (
    ConflictError,
    InvalidArgumentError,
    InvalidCredentialsError,
)
from citadel.domain.model import User
from citadel.domain.repository import UserRepository
from citadel.domain.value import Username

from .base import Service
from .password import check_password, hash_password


class AuthService(Service):
    """Domain service for registration and login."""

    def __init__(
        self, user_repository: UserRepository, identity_settings: IdentitySettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            identity_settings: Password hashing and Anonymous configuration
        """
        self.user_repository = user_repository
        self.identity_settings = identity_settings

    async def register(self, username: str, password: str) -> User:
        """Register a new user.

        Args:
            username: Desired display name
            password: Plain-text password, hashed with bcrypt before storage

        Returns:
            The created user

        Raises:
            InvalidArgumentError: If username or password is blank
            ConflictError: If the username is taken or reserved
        """
        with logfire.span("auth_service.register", username=username):
            if not username.strip() or not password:
                raise InvalidArgumentError("username and password are required")
            if username == self.identity_settings.anonymous_username:
                raise ConflictError("Username already taken")

            name = Username(username)
            if await self.user_repository.find_by_username(name) is not None:
                logfire.warn("Registration with taken username", username=username)
                raise ConflictError("Username already taken")

            password_hash = await hash_password(
                password, self.identity_settings.bcrypt_rounds
            )
            user = User(
                id=await self.user_repository.next_id(),
                username=name,
                password_hash=password_hash,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Concurrent registration lost", username=username)
                raise ConflictError("Username already taken")

            logfire.info("User registered", user_id=saved.id, username=username)
            return saved

    async def login(self, username: str, password: str) -> User:
        """Check a username/password pair.

        The Anonymous user can never log in.

        Raises:
            InvalidCredentialsError: For any mismatch
        """
        with logfire.span("auth_service.login", username=username):
            if (
                not username.strip()
                or username == self.identity_settings.anonymous_username
            ):
                raise InvalidCredentialsError()

            try:
                name = Username(username)
            except ValidationError:
                logfire.warn("Login with malformed username")
                raise InvalidCredentialsError()

            user = await self.user_repository.find_by_username(name)
            if user is None or not await check_password(password, user.password_hash):
                logfire.warn("Login failed", username=username)
                raise InvalidCredentialsError()

            logfire.info("User logged in", user_id=user.id)
            return user
