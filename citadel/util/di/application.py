"""Application layer DI providers."""

from dishka import Scope, provide

from citadel.application.usecase.auth import LoginUseCase, RegisterUseCase
from citadel.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from citadel.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from citadel.application.usecase.vote import CastVoteUseCase
from citadel.domain.service import (
    AuthService,
    CommentService,
    IdentityService,
    PostService,
    VoteService,
)
from citadel.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, identity_service: IdentityService, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            identity_service=identity_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            comment_service=comment_service,
            vote_service=vote_service,
            identity_service=identity_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, identity_service: IdentityService, post_service: PostService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            identity_service=identity_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, identity_service: IdentityService, post_service: PostService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            identity_service=identity_service, post_service=post_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, identity_service: IdentityService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            identity_service=identity_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, identity_service: IdentityService, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            identity_service=identity_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, identity_service: IdentityService, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            identity_service=identity_service, comment_service=comment_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, identity_service: IdentityService, vote_service: VoteService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            identity_service=identity_service, vote_service=vote_service
        )
