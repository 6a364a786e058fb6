#!/usr/bin/env python3
"""Upgrade the database schema to the latest Alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from citadel.config import Settings
from citadel.util.logging import setup_logging
from citadel.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Apply migrations up to ``revision``."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception:
            # Fail the deploy rather than serve a half-migrated schema
            logfire.exception("Database migration failed", revision=revision)
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
