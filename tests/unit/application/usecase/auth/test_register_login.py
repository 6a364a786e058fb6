"""Unit tests for auth use cases."""

import pytest

from citadel.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from citadel.domain.error import InvalidCredentialsError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterAndLogin:
    """Tests for RegisterUseCase and LoginUseCase."""

    @pytest.mark.asyncio
    async def test_register_then_login(self, unit_env):
        """A registered user should be able to log in."""
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)

        registered = await register_use_case.execute(
            RegisterRequest(username="samwell", password="books")
        )
        logged_in = await login_use_case.execute(
            LoginRequest(username="samwell", password="books")
        )

        assert registered.message == "User created successfully"
        assert logged_in.message == "Login successful"
        assert logged_in.user.id == registered.user.id
        assert logged_in.user.username == "samwell"
        assert "password_hash" not in logged_in.model_dump()["user"]

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, unit_env):
        """A wrong password should raise InvalidCredentialsError."""
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        await register_use_case.execute(
            RegisterRequest(username="samwell", password="books")
        )

        with pytest.raises(InvalidCredentialsError):
            await login_use_case.execute(
                LoginRequest(username="samwell", password="swords")
            )
