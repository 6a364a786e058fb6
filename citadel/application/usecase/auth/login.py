"""Login use case."""

from pydantic import BaseModel

from citadel.application.usecase.base import BaseUseCase
from citadel.application.usecase.views import UserView
from citadel.domain.service import AuthService


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    message: str = "Login successful"
    user: UserView


class LoginUseCase(BaseUseCase):
    """Use case for checking a username/password pair."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the credentials don't match
        """
        user = await self.auth_service.login(request.username, request.password)
        return LoginResponse(user=UserView.from_domain(user))
