"""Create post use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import PostView
from citadel.domain.service import IdentityService, PostService


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    username: str | None = None  # Empty or unknown posts as Anonymous
    board: str | None = None  # Default board when blank
    link: str | None = None


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post."""

    def __init__(
        self, identity_service: IdentityService, post_service: PostService
    ) -> None:
        """Initialize create post use case.

        Args:
            identity_service: Identity service resolving the author
            post_service: Post service
        """
        self.identity_service = identity_service
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Args:
            request: Post creation data

        Returns:
            Created post with a score of 0
        """
        author = await self.identity_service.resolve(request.username)
        post = await self.post_service.create_post(
            author=author,
            title=request.title,
            content=request.content,
            board=request.board,
            link=request.link,
        )
        return PostView.from_domain(post)
