#!/usr/bin/env python3
"""Serve the Citadel API with uvicorn."""

import sys

import logfire
import uvicorn

from citadel.config import Settings
from citadel.util.logging import setup_logging
from citadel.util.observability import configure_logfire


def main() -> int:
    """Configure telemetry, then hand the process over to uvicorn."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Citadel API",
        host=settings.api.host,
        port=settings.api.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "citadel.interface.api.app:create_app",
            factory=True,
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        # Report import and bind failures before the process dies
        logfire.exception("Citadel API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
