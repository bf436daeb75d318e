"""Stdlib logging bootstrap.

StackIt code logs through logfire. This only tames the plain loggers of
uvicorn, alembic and SQLAlchemy and forwards them to Logfire as well.
"""

import logging
import sys

import logfire

from stackit.config import Settings

FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Chatty below WARNING
QUIET_LOGGERS = ("uvicorn.access", "asyncpg", "sqlalchemy.engine")


def setup_logging(settings: Settings) -> None:
    """Send stdlib records to stdout and to Logfire."""
    level = logging.DEBUG if settings.debug else logging.INFO

    stdout = logging.StreamHandler(sys.stdout)
    stdout.setFormatter(logging.Formatter(FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logging.basicConfig(
        level=level,
        handlers=[stdout, logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
