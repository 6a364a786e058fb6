"""Cast vote use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.domain.service import IdentityService, VoteService
from citadel.domain.value import PostId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: int
    value: int  # Nonzero, usually +1 or -1
    username: str | None = None  # Empty or unknown votes as Anonymous


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    post_id: int
    score: int
    user_vote: int  # 0 when the vote was toggled off


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a post with toggle/switch semantics."""

    def __init__(
        self, identity_service: IdentityService, vote_service: VoteService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            identity_service: Identity service resolving the voter
            vote_service: Vote service
        """
        self.identity_service = identity_service
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Vote request with post ID, value and optional username

        Returns:
            New post score and the voter's effective vote

        Raises:
            InvalidArgumentError: If value is 0
            NotFoundError: If the post doesn't exist
        """
        voter = await self.identity_service.resolve(request.username)
        outcome = await self.vote_service.cast_vote(
            voter.id, PostId(request.post_id), request.value
        )
        return CastVoteResponse(
            post_id=request.post_id,
            score=outcome.score,
            user_vote=outcome.user_vote,
        )
