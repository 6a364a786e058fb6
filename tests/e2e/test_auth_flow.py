"""End-to-end tests for registration, login and health routes."""

import pytest
from fastapi.testclient import TestClient

from citadel.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


class TestAuthFlow:
    """End-to-end tests for username/password authentication."""

    def test_register_then_login(self, client):
        """A registered user should be able to log in."""
        # Act
        registered = client.post(
            "/register", json={"username": "bran", "password": "raven"}
        )
        logged_in = client.post(
            "/login", json={"username": "bran", "password": "raven"}
        )

        # Assert
        assert registered.status_code == 201
        assert registered.json()["user"]["username"] == "bran"
        assert logged_in.status_code == 200
        assert logged_in.json()["message"] == "Login successful"
        assert "password_hash" not in logged_in.json()["user"]

    def test_duplicate_registration_is_409(self, client):
        """Registering a taken name should conflict."""
        client.post("/register", json={"username": "bran", "password": "raven"})

        response = client.post(
            "/register", json={"username": "bran", "password": "other"}
        )

        assert response.status_code == 409
        assert response.json()["kind"] == "conflict"

    def test_wrong_password_is_401(self, client):
        """Bad credentials should be a 401."""
        client.post("/register", json={"username": "bran", "password": "raven"})

        response = client.post("/login", json={"username": "bran", "password": "crow"})

        assert response.status_code == 401
        assert response.json() == {
            "error": "Invalid username or password",
            "kind": "unauthenticated",
        }

    def test_missing_fields_are_422(self, client):
        """Malformed request bodies are rejected by request validation."""
        response = client.post("/register", json={"username": "bran"})

        assert response.status_code == 422


class TestHealth:
    """End-to-end tests for liveness routes."""

    def test_ping(self, client):
        """Ping should answer pong."""
        response = client.get("/ping")

        assert response.status_code == 200
        assert response.json() == {"message": "pong"}

    def test_health(self, client):
        """Health should report the service as healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
