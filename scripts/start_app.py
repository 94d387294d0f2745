#!/usr/bin/env python3
"""Serve the forum API, with startup failures reported to Logfire."""

import sys

import logfire
import uvicorn

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Both before uvicorn imports the app module
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting forum API",
        forum=settings.forum.name,
        environment=settings.environment,
        port=settings.port,
    )
    try:
        uvicorn.run(
            "agora.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,  # Client IPs for the spam check
        )
    except Exception:
        logfire.exception("Forum API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
