"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from citadel.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


class CredentialsAPIRequest(BaseModel):
    """API request carrying a username and password."""

    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: CredentialsAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account.

    Returns 409 when the username is already taken.
    """
    return await register_use_case.execute(
        RegisterRequest(username=request.username, password=request.password)
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: CredentialsAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Check credentials and return the user.

    Returns 401 on any mismatch.
    """
    return await login_use_case.execute(
        LoginRequest(username=request.username, password=request.password)
    )
