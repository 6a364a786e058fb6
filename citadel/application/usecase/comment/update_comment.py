"""Update comment use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import CommentView
from citadel.domain.service import CommentService, IdentityService
from citadel.domain.value import CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    username: str  # Acting user (must be author)
    content: str  # New content (required, cannot be empty)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self, identity_service: IdentityService, comment_service: CommentService
    ) -> None:
        self.identity_service = identity_service
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment or acting user doesn't exist
            ForbiddenError: If the acting user isn't the author
        """
        actor = await self.identity_service.resolve_actor(request.username)
        comment = await self.comment_service.update_comment(
            CommentId(request.comment_id), actor, request.content
        )
        return CommentView.from_domain(comment)
