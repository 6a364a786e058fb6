"""Create comment use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import CommentView
from citadel.domain.service import CommentService, IdentityService
from citadel.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    content: str
    username: str | None = None  # Empty or unknown comments as Anonymous
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to a comment."""

    def __init__(
        self, identity_service: IdentityService, comment_service: CommentService
    ) -> None:
        """Initialize create comment use case.

        Args:
            identity_service: Identity service resolving the author
            comment_service: Comment service
        """
        self.identity_service = identity_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Args:
            request: Comment creation data

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post doesn't exist
            InvalidArgumentError: If the parent is missing or on another post
        """
        author = await self.identity_service.resolve(request.username)
        comment = await self.comment_service.add_comment(
            post_id=PostId(request.post_id),
            author=author,
            content=request.content,
            parent_id=(
                CommentId(request.parent_id) if request.parent_id is not None else None
            ),
        )
        return CommentView.from_domain(comment)
