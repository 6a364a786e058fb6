"""Get post use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import CommentView, PostView
from citadel.domain.service import (
    CommentService,
    IdentityService,
    PostService,
    VoteService,
)
from citadel.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int
    username: str | None = None  # Viewer, used only to report their vote


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostView
    comments: list[CommentView]
    user_vote: int  # Viewer's vote, 0 if none or viewer unknown


class GetPostUseCase(BaseUseCase):
    """Use case for reading a post with its comments and the viewer's vote."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post service
            comment_service: Comment service
            vote_service: Vote service
            identity_service: Identity service (viewer lookup only)
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.identity_service = identity_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Reading never provisions the Anonymous user.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(request.post_id)
        post = await self.post_service.get_post_by_id(post_id)
        comments = await self.comment_service.get_comments_for_post(post_id)

        user_vote = 0
        viewer = await self.identity_service.find_viewer(request.username)
        if viewer is not None:
            user_vote = await self.vote_service.user_vote_for(viewer.id, post_id)

        return GetPostResponse(
            post=PostView.from_domain(post),
            comments=[CommentView.from_domain(c) for c in comments],
            user_vote=user_vote,
        )
