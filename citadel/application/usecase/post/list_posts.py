"""List posts use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import PostView
from citadel.domain.service import PostService


class ListPostsRequest(BaseModel):
    """List posts request."""

    board: str | None = None  # Case-insensitive board filter


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        posts = await self.post_service.list_posts(board=request.board)
        return ListPostsResponse(posts=[PostView.from_domain(p) for p in posts])
