"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from citadel.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a post."""

    value: int
    username: str | None = None  # Omitted or unknown votes as Anonymous


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    post_id: int,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote on a post.

    Repeating the same value removes the vote; a different value replaces it.

    Args:
        post_id: Post ID
        request: Vote value and optional username
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        New score and the caller's effective vote
    """
    return await cast_vote_use_case.execute(
        CastVoteRequest(post_id=post_id, value=request.value, username=request.username)
    )
