"""Logfire setup and instrumentation.

Services log through logfire directly:

    with logfire.span("vote_service.cast_vote", post_id=post_id):
        ...
        logfire.info("Vote switched", post_id=post_id, score=score)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from citadel.config import Settings

SERVICE_NAME = "citadel-backend"
SERVICE_VERSION = "0.1.0"

# Liveness probes are polled constantly and carry no information
UNTRACED_URLS = "/ping,/health"


def _sends_to_cloud(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Spans are exported to the Logfire cloud when a token is configured
    (or ``OBSERVABILITY__SEND_TO_LOGFIRE=true``) and always printed to the
    console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _sends_to_cloud(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    """Tag request spans with the acted-on post or comment."""
    path_params = getattr(request, "path_params", None) or {}
    extra = {
        name: path_params[name]
        for name in ("post_id", "comment_id")
        if name in path_params
    }
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except the liveness probes.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    # Instrumentation hooks into the sync engine wrapped by the async one
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
