#!/usr/bin/env python3
"""Serve the Threadline API under uvicorn."""

import sys

import logfire
import uvicorn

from threadline.config import Settings
from threadline.util.logging import setup_logging
from threadline.util.observability import configure_logfire


def main() -> int:
    """Configure telemetry first so that import and bind errors are reported."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting Threadline API", host=settings.host, port=settings.port)
    try:
        # The app (and its DI container) is built inside the server process
        uvicorn.run(
            "threadline.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
