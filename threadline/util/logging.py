"""Standard library logging setup.

Application events go through logfire. This only sets levels and a format
for the libraries that log through ``logging`` (uvicorn, SQLAlchemy,
asyncpg, alembic).
"""

import logging
import sys

from threadline.config import Settings

# Library loggers kept quiet unless debugging
NOISY_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the given environment.

    Args:
        settings: Application settings; ``debug`` selects DEBUG over INFO
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    library_level = logging.DEBUG if settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
