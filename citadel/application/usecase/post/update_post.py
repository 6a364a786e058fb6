"""Update post use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import PostView
from citadel.domain.service import IdentityService, PostService
from citadel.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: int
    username: str  # Acting user (must be author)
    title: str | None = None  # Blank leaves the title unchanged
    content: str | None = None  # Blank leaves the content unchanged


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post's title and content."""

    def __init__(
        self, identity_service: IdentityService, post_service: PostService
    ) -> None:
        """Initialize update post use case.

        Args:
            identity_service: Identity service resolving the acting user
            post_service: Post service
        """
        self.identity_service = identity_service
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Args:
            request: Update post request with post ID, acting user and fields

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post or acting user doesn't exist
            ForbiddenError: If the acting user isn't the author
        """
        actor = await self.identity_service.resolve_actor(request.username)
        post = await self.post_service.update_post(
            PostId(request.post_id),
            actor,
            title=request.title,
            content=request.content,
        )
        return PostView.from_domain(post)
