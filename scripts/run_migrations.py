#!/usr/bin/env python3
"""Apply Alembic migrations up to head before the API starts."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from threadline.config import Settings
from threadline.util.observability import configure_logfire


def main() -> int:
    """Upgrade the comments schema, reporting failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    # migrations/env.py reads the URL from Settings, not from alembic.ini
    with logfire.span("migrations.upgrade", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the container rather than serve on a stale schema
            raise

    logfire.info("Database schema at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
