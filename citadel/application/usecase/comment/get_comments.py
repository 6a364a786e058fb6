"""Get comments use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import CommentThreadView, CommentView
from citadel.domain.service import CommentService
from citadel.domain.value import PostId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response.

    ``comments`` is the flat list, oldest first. ``thread`` arranges the
    same comments as a forest, with nesting capped at ``THREAD_DEPTH_LIMIT``.
    """

    post_id: int
    total: int
    comments: list[CommentView]
    thread: list[CommentThreadView]


class GetCommentsUseCase(BaseUseCase):
    """Use case for retrieving a post's comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        comments = await self.comment_service.get_comments_for_post(
            PostId(request.post_id)
        )
        roots = self.comment_service.build_thread(comments)

        return GetCommentsResponse(
            post_id=request.post_id,
            total=len(comments),
            comments=[CommentView.from_domain(c) for c in comments],
            thread=[CommentThreadView.from_node(node) for node in roots],
        )
