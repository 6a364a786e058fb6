"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from citadel.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from citadel.application.usecase.views import CommentView

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    username: str | None = None  # Omitted or unknown comments as Anonymous
    parent_id: int | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    username: str = Field(min_length=1)


class DeleteCommentAPIRequest(BaseModel):
    """API request for deleting a comment."""

    username: str = Field(min_length=1)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentView:
    """Comment on a post or reply to another comment.

    Args:
        post_id: Post ID
        request: Comment content, optional username and parent
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=post_id,
            content=request.content,
            username=request.username,
            parent_id=request.parent_id,
        )
    )


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get a post's comments, flat and as a thread."""
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.put("/comments/{comment_id}", response_model=CommentView)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentView:
    """Amend a comment. Author only."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            username=request.username,
            content=request.content,
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    request: DeleteCommentAPIRequest,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Erase a comment. Author only; its replies move up one level."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, username=request.username)
    )
