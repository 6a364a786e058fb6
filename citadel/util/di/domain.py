"""Domain layer DI providers."""

from dishka import Scope, provide

from citadel.config import BoardSettings, IdentitySettings
from citadel.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from citadel.domain.service import (
    AuthService,
    CommentService,
    IdentityService,
    PostService,
    VoteService,
)
from citadel.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(
        self, user_repository: UserRepository, identity_settings: IdentitySettings
    ) -> IdentityService:
        """Provide identity resolver."""
        return IdentityService(
            user_repository=user_repository, identity_settings=identity_settings
        )

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, identity_settings: IdentitySettings
    ) -> AuthService:
        """Provide registration/login service."""
        return AuthService(
            user_repository=user_repository, identity_settings=identity_settings
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, post_repository: PostRepository
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, post_repository=post_repository
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        vote_service: VoteService,
        comment_service: CommentService,
        board_settings: BoardSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            vote_service=vote_service,
            comment_service=comment_service,
            board_settings=board_settings,
        )
