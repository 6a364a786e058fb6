"""Delete post use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.domain.service import IdentityService, PostService
from citadel.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    username: str  # Acting user (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: int
    message: str = "Scroll banished to the Wall"


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post with its votes and comments."""

    def __init__(
        self, identity_service: IdentityService, post_service: PostService
    ) -> None:
        self.identity_service = identity_service
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post or acting user doesn't exist
            ForbiddenError: If the acting user isn't the author
        """
        actor = await self.identity_service.resolve_actor(request.username)
        await self.post_service.delete_post(PostId(request.post_id), actor)
        return DeletePostResponse(post_id=request.post_id)
