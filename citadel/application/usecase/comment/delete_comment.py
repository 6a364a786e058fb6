"""Delete comment use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.domain.service import CommentService, IdentityService
from citadel.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    username: str  # Acting user (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    message: str = "Mark erased"


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a single comment."""

    def __init__(
        self, identity_service: IdentityService, comment_service: CommentService
    ) -> None:
        self.identity_service = identity_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Replies to the deleted comment move up one level.
        """
        actor = await self.identity_service.resolve_actor(request.username)
        await self.comment_service.delete_comment(CommentId(request.comment_id), actor)
        return DeleteCommentResponse(comment_id=request.comment_id)
