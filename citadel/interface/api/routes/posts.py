"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from citadel.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from citadel.application.usecase.views import PostView

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=40000)
    username: str | None = None  # Omitted or unknown posts as Anonymous
    board: str | None = Field(default=None, max_length=100)
    link: str | None = None


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Empty fields are left unchanged."""

    username: str = Field(min_length=1)
    title: str | None = Field(default=None, max_length=300)
    content: str | None = Field(default=None, max_length=40000)


class ActingUserAPIRequest(BaseModel):
    """API request body naming the acting user."""

    username: str = Field(min_length=1)


@router.get("", response_model=list[PostView])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    board: str | None = None,
) -> list[PostView]:
    """List posts newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        board: Optional board filter (case-insensitive)

    Returns:
        Posts ordered by creation time, newest first
    """
    response = await list_posts_use_case.execute(ListPostsRequest(board=board))
    return response.posts


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostView:
    """Create a post on a board."""
    return await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title,
            content=request.content,
            username=request.username,
            board=request.board,
            link=request.link,
        )
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
    username: str | None = None,
) -> GetPostResponse:
    """Get a post with its comments and the viewer's vote.

    Args:
        post_id: Post ID
        get_post_use_case: Get post use case from DI
        username: Viewer whose vote is reported as ``user_vote``

    Returns:
        Post, flat comment list and the viewer's vote (0 if none)
    """
    return await get_post_use_case.execute(
        GetPostRequest(post_id=post_id, username=username)
    )


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> PostView:
    """Rewrite a post's title and/or content. Author only."""
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            username=request.username,
            title=request.title,
            content=request.content,
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: int,
    request: ActingUserAPIRequest,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Delete a post together with its votes and comments. Author only."""
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, username=request.username)
    )
