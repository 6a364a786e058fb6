"""Standard library logging for third-party libraries."""

import logging
import sys

from citadel.config import Settings

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("asyncio", "httpx", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Citadel's own events go through logfire; this covers uvicorn,
    SQLAlchemy, alembic and anything else using ``logging``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # SQL echo only when debugging
    sql_level = logging.INFO if settings.debug else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
