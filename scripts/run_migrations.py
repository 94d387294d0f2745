#!/usr/bin/env python3
"""Upgrade the forum database to the latest Alembic revision.

Run from the repository root (``alembic.ini`` is read from the working
directory) before starting a new release.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception:
            # The deploy must fail rather than serve a stale schema
            logfire.exception("Database migration failed")
            raise

    logfire.info("Database is at the latest revision")
    return 0


if __name__ == "__main__":
    sys.exit(main())
