"""Register use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import UserView
from citadel.domain.service import AuthService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    password: str


class RegisterResponse(BaseModel):
    """Register response."""

    message: str = "User created successfully"
    user: UserView


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Raises:
            ConflictError: If the username is taken
        """
        user = await self.auth_service.register(request.username, request.password)
        return RegisterResponse(user=UserView.from_domain(user))
