"""Identity domain service.

Maps the display names sent by clients to users. Requests without a
usable name act as the shared Anonymous user, which is created the first
time anyone needs it.
"""

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from citadel.config import IdentitySettings
from citadel.domain.error import InvalidArgumentError, NotFoundError
from citadel.domain.model import User
from citadel.domain.repository import UserRepository
from citadel.domain.value import Username

from .base import Service
from .password import hash_password


class IdentityService(Service):
    """Domain service resolving display names to users."""

    def __init__(
        self, user_repository: UserRepository, identity_settings: IdentitySettings
    ) -> None:
        """Initialize identity service.

        Args:
            user_repository: User repository
            identity_settings: Anonymous identity configuration
        """
        self.user_repository = user_repository
        self.identity_settings = identity_settings

    @property
    def anonymous_username(self) -> Username:
        """Display name of the shared Anonymous user."""
        return Username(self.identity_settings.anonymous_username)

    def is_anonymous(self, username: str | None) -> bool:
        """Check whether a supplied name means "no identity".

        Args:
            username: Name as sent by the client

        Returns:
            True for None, blank, or the anonymous marker itself
        """
        if username is None or not username.strip():
            return True
        return username == self.identity_settings.anonymous_username

    async def resolve(self, username: str | None) -> User:
        """Resolve the author of a vote, comment or new post.

        Unknown names fall back to the Anonymous user instead of failing.

        Args:
            username: Name as sent by the client, possibly empty

        Returns:
            The named user, or the Anonymous user
        """
        with logfire.span("identity_service.resolve", username=username):
            if self.is_anonymous(username):
                return await self.ensure_anonymous()

            user = await self._find_known(username)
            if user is None:
                logfire.info("Unknown username, acting as Anonymous", username=username)
                return await self.ensure_anonymous()
            return user

    async def resolve_actor(self, username: str) -> User:
        """Resolve the user performing an update or delete.

        Unlike ``resolve`` this never falls back to Anonymous.

        Args:
            username: Acting username

        Returns:
            The matching user

        Raises:
            InvalidArgumentError: If the username is blank
            NotFoundError: If no user has that name
        """
        with logfire.span("identity_service.resolve_actor", username=username):
            if not username or not username.strip():
                raise InvalidArgumentError("username is required")

            user = await self.user_repository.find_by_username(Username(username))
            if user is None:
                logfire.warn("Acting user not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def find_viewer(self, username: str | None) -> User | None:
        """Look up the user viewing a post, without provisioning anything.

        Args:
            username: Viewer name from the query string

        Returns:
            The user if the name is known, None otherwise
        """
        if username is None or not username.strip():
            return None
        return await self._find_known(username)

    async def _find_known(self, username: str) -> User | None:
        # A name that could never be registered belongs to nobody
        try:
            name = Username(username)
        except ValidationError:
            return None
        return await self.user_repository.find_by_username(name)

    async def ensure_anonymous(self) -> User:
        """Return the Anonymous user, creating it on first use.

        Concurrent first calls race on the unique username constraint; the
        loser re-reads the row the winner inserted.

        Returns:
            The single Anonymous user
        """
        name = self.anonymous_username
        user = await self.user_repository.find_by_username(name)
        if user is not None:
            return user

        with logfire.span("identity_service.ensure_anonymous"):
            password_hash = await hash_password(
                self.identity_settings.anonymous_credential,
                self.identity_settings.bcrypt_rounds,
            )
            candidate = User(
                id=await self.user_repository.next_id(),
                username=name,
                password_hash=password_hash,
            )

            try:
                user = await self.user_repository.save(candidate)
            except IntegrityError:
                logfire.info("Anonymous user provisioned concurrently, re-fetching")
                existing = await self.user_repository.find_by_username(name)
                if existing is None:
                    raise
                return existing

            logfire.info("Anonymous user provisioned", user_id=user.id)
            return user
