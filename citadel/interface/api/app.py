"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from citadel.config import Settings
from citadel.interface.api.routes import auth, comments, health, posts, votes
from citadel.interface.error import register_error_handlers
from citadel.util.di.container import create_container, setup_di
from citadel.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function;
    ``scripts/start_app.py`` does so in production and ``tests/conftest.py``
    in tests.

    Args:
        container: DI container to use, the production container if None

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Citadel API",
        description="Discussion board backend: scrolls, threaded marks and votes",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)

    return app_instance
